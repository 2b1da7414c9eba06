from __future__ import annotations


class UserImageServiceError(Exception):
    status_code = 500
    code = "user_image_error"
    default_message = "Profile image request failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentifier(UserImageServiceError):
    status_code = 400
    code = "invalid_identifier"
    default_message = "Invalid user id"


class InvalidRequestBody(UserImageServiceError):
    status_code = 400
    code = "invalid_request_body"
    default_message = "Invalid form data"


class NoFileUploaded(UserImageServiceError):
    status_code = 400
    code = "no_file_uploaded"
    default_message = "No file uploaded"


class UnsupportedMediaType(UserImageServiceError):
    status_code = 400
    code = "unsupported_media_type"
    default_message = "Only image files allowed"


class ImageTooLarge(UserImageServiceError):
    status_code = 400
    code = "image_too_large"
    default_message = "Uploaded image is too large"


class PathResolutionError(UserImageServiceError):
    status_code = 500
    code = "path_resolution_error"
    default_message = "Failed to build image path"


class UserNotFound(UserImageServiceError):
    status_code = 404
    code = "user_not_found"
    default_message = "User not found"


class ImageUpdateConflict(UserImageServiceError):
    status_code = 409
    code = "image_update_conflict"
    default_message = "Profile image was changed by another request"


class UnexpectedFailure(UserImageServiceError):
    status_code = 500
    code = "unexpected_failure"

    @classmethod
    def from_exception(cls, exc: BaseException) -> UnexpectedFailure:
        return cls(str(exc) or exc.__class__.__name__)
