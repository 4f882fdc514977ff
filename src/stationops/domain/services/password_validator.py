"""Password strength rules for accounts created from invitations."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordValidationError:
    """A single failed password rule.

    Attributes:
        field: The field name (always 'password').
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code}


class PasswordValidator:
    """Checks a password against a length rule and character-class rules.

    The default policy asks for at least 8 characters with one uppercase
    letter, one lowercase letter and one digit. Symbols are optional.
    """

    SPECIAL_CHARS = r"!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>\/?`~"

    def __init__(
        self,
        min_length: int = 8,
        require_uppercase: bool = True,
        require_lowercase: bool = True,
        require_digit: bool = True,
        require_special: bool = False,
    ) -> None:
        self.min_length = min_length
        # (enabled, pattern, code, message)
        self._class_rules = [
            (require_uppercase, r"[A-Z]", "password_no_uppercase", "one uppercase letter"),
            (require_lowercase, r"[a-z]", "password_no_lowercase", "one lowercase letter"),
            (require_digit, r"\d", "password_no_digit", "one number"),
            (
                require_special,
                f"[{self.SPECIAL_CHARS}]",
                "password_no_special",
                "one special character",
            ),
        ]

    def validate(self, password: str) -> list[PasswordValidationError]:
        """Validate a password against the policy.

        Args:
            password: The password to validate.

        Returns:
            List of validation errors, in rule order. Empty if the password is valid.
        """
        errors: list[PasswordValidationError] = []

        if len(password) < self.min_length:
            errors.append(
                PasswordValidationError(
                    field="password",
                    message=f"Password must be at least {self.min_length} characters",
                    code="password_too_short",
                )
            )

        for enabled, pattern, code, requirement in self._class_rules:
            if enabled and not re.search(pattern, password):
                errors.append(
                    PasswordValidationError(
                        field="password",
                        message=f"Password must contain at least {requirement}",
                        code=code,
                    )
                )

        return errors

    def is_valid(self, password: str) -> bool:
        return not self.validate(password)


default_password_validator = PasswordValidator()
