"""
User Management - Exceptions
"""


class UserServiceError(Exception):
    """Base exception for user service errors"""
    code = "USER_ERROR"
    status_code = 400


class UserNotFoundError(UserServiceError):
    """Raised when no user exists for the requested id"""
    code = "USER_NOT_FOUND"
    status_code = 404

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class UserIdMismatchError(UserServiceError):
    """Raised when the id in an update body disagrees with the path id"""
    code = "USER_ID_MISMATCH"
    status_code = 400

    def __init__(self, path_id: int, body_id: int):
        self.path_id = path_id
        self.body_id = body_id
        super().__init__(f"Body id {body_id} does not match path id {path_id}")
