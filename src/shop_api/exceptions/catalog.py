"""
User-facing text for error codes.

The `detail` of every problem response comes from here, never from the raw
exception, so it is safe to show in the UI. Lookups are case-insensitive and
unknown codes get the generic ERROR text.
"""
from types import MappingProxyType

_VI = MappingProxyType({
    "UNAUTHENTICATED": "Bạn cần đăng nhập để tiếp tục.",
    "UNAUTHENTICATED_OR_NO_SESSION_USER": "Bạn cần đăng nhập để tiếp tục.",
    "USER_INFO_NOT_FOUND": "Không tìm thấy hồ sơ người dùng.",
    "PHONE_ALREADY_IN_USE": "Số điện thoại này đã được dùng. Vui lòng chọn số khác.",
    "USER_UPDATE_PROFILE_FAILED": "Cập nhật hồ sơ không thành công. Vui lòng thử lại.",
    "TOKEN_INVALID_OR_NO_USERID": "Thiếu hoặc sai thông tin người dùng trong token.",
    "VALIDATION_FAILED": "Dữ liệu gửi lên không hợp lệ.",
    "ERROR": "Đã xảy ra lỗi, vui lòng thử lại.",
})

_EN = MappingProxyType({
    "UNAUTHENTICATED": "Please sign in to continue.",
    "UNAUTHENTICATED_OR_NO_SESSION_USER": "Please sign in to continue.",
    "USER_INFO_NOT_FOUND": "User profile not found.",
    "PHONE_ALREADY_IN_USE": "This phone number is already in use. Please choose another one.",
    "USER_UPDATE_PROFILE_FAILED": "Could not update the profile. Please try again.",
    "TOKEN_INVALID_OR_NO_USERID": "The token is missing or has no valid user id.",
    "VALIDATION_FAILED": "The request data is invalid.",
    "ERROR": "Something went wrong, please try again.",
})

CATALOGS = MappingProxyType({"vi": _VI, "en": _EN})
DEFAULT_LOCALE = "vi"


def resolve_locale(accept_language: str | None, default: str = DEFAULT_LOCALE) -> str:
    """
    Pick the first supported language from an Accept-Language header.

    "en-US,en;q=0.9,vi;q=0.8" -> "en". Quality values are not ranked; browsers
    already send languages in preference order.
    """
    for part in (accept_language or "").split(","):
        lang = part.split(";")[0].strip().lower()
        primary = lang.split("-")[0]
        if primary in CATALOGS:
            return primary
    return default if default in CATALOGS else DEFAULT_LOCALE


def friendly_message(code: str | None, *, locale: str = DEFAULT_LOCALE, fallback: str | None = None) -> str:
    catalog = CATALOGS.get(locale, CATALOGS[DEFAULT_LOCALE])
    if code and code.strip():
        msg = catalog.get(code.strip().upper())
        if msg:
            return msg
    return fallback if fallback else catalog["ERROR"]
