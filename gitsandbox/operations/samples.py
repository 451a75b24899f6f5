"""Sample repositories: canned starter snapshots for the sandbox."""

import json
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import structlog

from gitsandbox.core.errors import SampleError

logger = structlog.get_logger(__name__)

SAMPLES_PACKAGE = 'gitsandbox.samples'


@dataclass
class SampleRepository:
    """
    A named repository snapshot.

    initial_state uses the dictionary format of RepositoryState.to_dict():
    currentBranch, branches, commits and files keyed by path.
    """
    name: str
    description: str = ''
    initial_state: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SampleRepository':
        """
        Parse a sample from its dictionary form.

        Only the outer shape is checked; the snapshot itself is trusted.

        Raises:
            SampleError: If name or initialState is missing
        """
        if not isinstance(data, Mapping):
            raise SampleError("Sample must be a JSON object")
        if not data.get('name'):
            raise SampleError("Sample is missing 'name'")
        initial_state = data.get('initialState')
        if not isinstance(initial_state, Mapping):
            raise SampleError(f"Sample '{data['name']}' is missing 'initialState'")

        return cls(
            name=data['name'],
            description=data.get('description', ''),
            initial_state=dict(initial_state),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'initialState': self.initial_state,
        }


def parse_sample(text: str) -> SampleRepository:
    """Parse a sample from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SampleError(f"Invalid sample JSON: {e}") from e
    return SampleRepository.from_dict(data)


def load_sample_file(path: Union[str, Path]) -> SampleRepository:
    """
    Read a sample from a JSON file.

    Raises:
        SampleError: If the file cannot be read or parsed
    """
    try:
        text = Path(path).read_text(encoding='utf-8')
    except OSError as e:
        raise SampleError(f"Cannot read sample {path}: {e}") from e
    sample = parse_sample(text)
    logger.debug('sample_file_read', path=str(path), sample=sample.name)
    return sample


def _bundled_files() -> List[Any]:
    root = resources.files(SAMPLES_PACKAGE)
    return sorted(
        (entry for entry in root.iterdir() if entry.name.endswith('.json')),
        key=lambda entry: entry.name,
    )


def list_samples() -> List[SampleRepository]:
    """All samples bundled with the package, ordered by file name."""
    return [parse_sample(entry.read_text(encoding='utf-8')) for entry in _bundled_files()]


def get_sample(name: str) -> SampleRepository:
    """
    Look up a bundled sample by name or file stem (e.g. 'todo-app').

    Raises:
        SampleError: If no bundled sample matches
    """
    for entry in _bundled_files():
        sample = parse_sample(entry.read_text(encoding='utf-8'))
        if name in (sample.name, entry.name[:-len('.json')]):
            return sample
    raise SampleError(f"Unknown sample: {name}")
