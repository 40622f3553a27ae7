import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Literal
from unittest import TestCase
from unittest.mock import MagicMock, patch

_DeploymentTargets = Literal[
    'dev',
    'staging',
    'production'
]


class TestBase(TestCase):
    """Base class for unit tests."""

    _repo_root = Path(__file__).parents[1]
    _events_dir = _repo_root / 'tests/handlers/events'
    _configs_dir = _repo_root / 'app/common/configs'

    # Paths in this list will be automatically patched for all test cases.
    # Overwrite in subclasses to populate the list.
    _to_patch: List[str] = []

    # Shared between instances, files don't change during a test run.
    _cache: Dict[Path, Any] = {}

    @classmethod
    def _load_n_cache(cls, path: Path) -> Any:
        if path not in cls._cache:
            with open(path) as f:
                cls._cache[path] = json.load(f)

        # Make deep copy as the result may be mutated.
        return deepcopy(cls._cache[path])

    def get_event(self, event_name: str) -> Any:
        """Get a Lambda event by name.

        Args:
            event_name: The name of the event file without extension.

        Returns:
            The event as a dict.

        Raises:
            OSError if file is not found.

        """
        return self._load_n_cache(self._events_dir / f'{event_name}.json')

    def get_configs(self, deployment_target: _DeploymentTargets) -> Any:
        """Get CloudFormation template parameters.

        Args:
            deployment_target: The deployment target to get configs for.

        Returns:
            The parameters as a list of dicts.

        Raises:
            OSError if file is not found.

        """
        path = self._configs_dir / f'{deployment_target}.json'
        return self._load_n_cache(path)

    def setUp(self):
        self._mocks: Dict[str, MagicMock] = {}
        for path in self._to_patch:
            patcher = patch(path)
            name = path.split('.')[-1]
            self._mocks[name] = patcher.start()
            self.addCleanup(patcher.stop)
