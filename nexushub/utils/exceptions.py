from fastapi import HTTPException, status


class BaseAPIException(HTTPException):
    """Base exception for API errors.
    Ensures clarity and actionable next steps."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred. Please try again.",
    ):
        super().__init__(status_code=status_code, detail=detail)


# ============== Staff & Permissions ==============


class PermissionDeniedException(BaseAPIException):
    """Enforces the admin-only Settings operations."""

    def __init__(
        self, detail: str = "You do not have the required permissions for this action."
    ):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


class SelfRemovalException(BaseAPIException):
    """The acting user can never remove their own account."""

    def __init__(self, detail: str = "You cannot remove the account you are signed in with."):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


# ============== General Operational Exceptions ==============


class ResourceNotFoundException(BaseAPIException):
    """Generic fallback for missing resources."""

    def __init__(self, detail: str = "The requested information could not be found."):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class UserNotFoundException(ResourceNotFoundException):
    def __init__(self, detail: str = "User not found."):
        super().__init__(detail=detail)


class ToolNotFoundException(ResourceNotFoundException):
    """Also raised for tools that exist but are hidden from the acting user."""

    def __init__(self, detail: str = "Tool not found."):
        super().__init__(detail=detail)


# ============== Departments ==============


class InvalidDepartmentError(BaseAPIException):
    """Triggered when a user is assigned to a department that does not exist."""

    def __init__(self, detail: str = "Invalid department provided."):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class DepartmentAlreadyExistsException(BaseAPIException):
    def __init__(self, detail: str = "Department already exists."):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


class DepartmentNotFoundException(ResourceNotFoundException):
    def __init__(self, detail: str = "Department not found."):
        super().__init__(detail=detail)


# ============== Credentials ==============


class CredentialsHiddenException(BaseAPIException):
    """Tool is listed but its stored credentials are not for this user."""

    def __init__(self, detail: str = "You are not allowed to view credentials for this tool."):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )
