from __future__ import annotations


class CordovaError(RuntimeError):
    pass


class NotAndroidProjectError(CordovaError):
    def __init__(self, project: str) -> None:
        super().__init__(f'The provided path "{project}" is not an Android project.')
        self.project = project


class EntryPointNotFoundError(CordovaError):
    pass
