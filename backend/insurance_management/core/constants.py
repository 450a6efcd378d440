"""Shared constants, enums and user-facing messages used across the application."""

from enum import IntEnum, StrEnum


class UserRole(StrEnum):
    """Application roles for registered users."""

    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"


class PaymentStatus(StrEnum):
    """Common payment states. The column itself is free-form."""

    PENDING = "Pending"
    PAID = "Paid"
    FAILED = "Failed"
    REFUNDED = "Refunded"


class PurchaseStatus(StrEnum):
    """Lifecycle of a policy purchase."""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


class ErrorCode(IntEnum):
    """Application error codes returned in structured error bodies."""

    ACCOUNT_NOT_FOUND = 1


class Messages:
    """Localized (vi) messages surfaced to API clients."""

    REQUIRED = "Trường này là bắt buộc"
    INVALID_EMAIL = "Email không hợp lệ"
    INVALID_PHONE = "Số điện thoại phải có 10 chữ số"
    INVALID_BANK_ACCOUNT = "Vui lòng nhập số tài khoản hợp lệ (9-14 số)"
    EMAIL_TAKEN = "Email đã được sử dụng"
    PASSWORD_TOO_SHORT = "Mật khẩu phải có ít nhất 6 ký tự"
    PASSWORD_TOO_LONG = "Mật khẩu không được dài quá 72 byte"
    TOO_SHORT = "Phải có ít nhất {min_length} ký tự"
    USER_NOT_FOUND = "Người dùng không tồn tại"
    INSURANCE_NOT_FOUND = "Bảo hiểm không tồn tại"
    PURCHASE_EXISTS = "Người dùng đã mua bảo hiểm này"
    ACCOUNT_NOT_FOUND = "Tài khoản không tồn tại"
    PURCHASE_STATUS_UPDATED = "Tình trạng đã được cập nhật thành công"
    DELETED = "Đã xóa thành công"
    STORAGE_UNAVAILABLE = "Không thể tải ảnh lên, vui lòng thử lại sau"
