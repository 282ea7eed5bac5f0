"""Custom exceptions for flowboard."""


class FlowboardError(Exception):
    """Base exception for flowboard operations."""


class RemoteStoreError(FlowboardError):
    """Error while talking to the remote project store."""


class FetchError(RemoteStoreError):
    """Error during project loading."""


class ProjectNotFoundError(FetchError):
    """The project store has no project with the requested id."""


class SaveError(RemoteStoreError):
    """Error while writing a project to the store."""


class ProjectNotLoadedError(FlowboardError):
    """Board operation attempted before a project finished loading."""
