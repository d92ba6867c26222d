from __future__ import annotations

from pathlib import Path
from typing import Union


class BundleError(RuntimeError):
    """Base class for every failure raised while building a bundle."""


class UsageError(BundleError):
    pass


class MissingManifestError(BundleError):
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"Source file {self.path} does not exist.")


class MissingInputError(BundleError):
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"File {self.path} does not exist!")


class BundleIOError(BundleError):
    pass


class ConfigError(BundleError):
    pass
