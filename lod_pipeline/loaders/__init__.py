"""Dataset loaders."""

from .base import DatasetLoader, load_entities, loader_for_path  # noqa: F401
from .files import JSONLLoader, JSONLoader, YAMLLoader  # noqa: F401
