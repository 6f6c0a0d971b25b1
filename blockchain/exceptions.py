"""
Toolchain Exceptions
Errors raised while resolving, deploying and confirming contracts
"""


class ToolchainError(Exception):
    """Base class for contract toolchain failures"""


class ArtifactNotFoundError(ToolchainError):
    """No usable compiled artifact matches the requested contract name"""


class DeploymentError(ToolchainError):
    """Building, signing or submitting the deployment transaction failed"""


class ConfirmationError(ToolchainError):
    """The network did not confirm the deployment (timeout, revert, dropped)"""
