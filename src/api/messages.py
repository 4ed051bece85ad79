"""
Message catalog - Human-readable texts for error codes and responses.

Every (Field, ErrorCode) pair a field can produce has an entry in each
locale. Lookups for a missing pair raise UnmappedErrorCode instead of
falling back to a generic text.
"""

from dataclasses import dataclass

from src.domain.errors import FIELD_ERROR_CODES, ErrorCode, Field


class UnmappedErrorCode(LookupError):
    """An error code has no message for its field. Always a programming error."""

    def __init__(self, field: Field, code: ErrorCode, locale: str) -> None:
        super().__init__(f"No {locale!r} message for {field.value}.{code.value}")
        self.field = field
        self.code = code


_EN_FIELD_MESSAGES: dict[tuple[Field, ErrorCode], str] = {
    (Field.NAME, ErrorCode.EMPTY): "The name field is required.",
    (Field.NAME, ErrorCode.INVALID_TYPE): "The name must be a string.",
    (Field.NAME, ErrorCode.TOO_SHORT): "The name must be at least 3 characters.",
    (Field.NAME, ErrorCode.TOO_LONG): "The name may not be greater than 100 characters.",
    (Field.NAME, ErrorCode.INVALID_CHARACTERS): (
        "The name may only contain letters, numbers, spaces, hyphens and underscores."
    ),
    (Field.EMAIL, ErrorCode.EMPTY): "The email field is required.",
    (Field.EMAIL, ErrorCode.INVALID_TYPE): "The email must be a string.",
    (Field.EMAIL, ErrorCode.INVALID_FORMAT): (
        "The email has an invalid format. It should be like email@email.com"
    ),
    (Field.EMAIL, ErrorCode.MISSING_DOMAIN_DOT): "The email domain must contain a dot.",
    (Field.EMAIL, ErrorCode.EMAIL_ALREADY_EXISTS): (
        "The email you entered already exists. You must choose another one"
    ),
    (Field.PASSWORD, ErrorCode.EMPTY): "The password field is required.",
    (Field.PASSWORD, ErrorCode.INVALID_TYPE): "The password must be a string.",
    (Field.PASSWORD, ErrorCode.TOO_SHORT): "The password must be at least 8 characters.",
    (Field.PASSWORD, ErrorCode.TOO_LONG): "The password may not be greater than 50 characters.",
    (Field.PASSWORD, ErrorCode.MISSING_UPPERCASE): (
        "The password must contain at least one uppercase letter."
    ),
    (Field.PASSWORD, ErrorCode.MISSING_LOWERCASE): (
        "The password must contain at least one lowercase letter."
    ),
    (Field.PASSWORD, ErrorCode.MISSING_NUMBER): "The password must contain at least one number.",
    (Field.PASSWORD, ErrorCode.MISSING_SPECIAL_CHARACTER): (
        "The password must contain at least one special character."
    ),
    (Field.ID, ErrorCode.EMPTY): "Internal error: User ID not generated.",
    (Field.ID, ErrorCode.INVALID_FORMAT): "The user ID has an invalid format.",
}

_ES_FIELD_MESSAGES: dict[tuple[Field, ErrorCode], str] = {
    (Field.NAME, ErrorCode.EMPTY): "El campo name es obligatorio.",
    (Field.NAME, ErrorCode.INVALID_TYPE): "El campo name debe ser una cadena de texto.",
    (Field.NAME, ErrorCode.TOO_SHORT): "El nombre debe tener al menos 3 caracteres.",
    (Field.NAME, ErrorCode.TOO_LONG): "El nombre no puede tener más de 100 caracteres.",
    (Field.NAME, ErrorCode.INVALID_CHARACTERS): (
        "El nombre solo puede contener letras, números, espacios, guiones y guiones bajos."
    ),
    (Field.EMAIL, ErrorCode.EMPTY): "El campo email es obligatorio.",
    (Field.EMAIL, ErrorCode.INVALID_TYPE): "El campo email debe ser una cadena de texto.",
    (Field.EMAIL, ErrorCode.INVALID_FORMAT): (
        "El correo electrónico tiene un formato inválido. Debe tener el formato email@email.com"
    ),
    (Field.EMAIL, ErrorCode.MISSING_DOMAIN_DOT): (
        "El dominio del correo electrónico debe contener un punto."
    ),
    (Field.EMAIL, ErrorCode.EMAIL_ALREADY_EXISTS): (
        "El correo electrónico que has teclado ya existe. Debes elegir otro"
    ),
    (Field.PASSWORD, ErrorCode.EMPTY): "El campo password es obligatorio.",
    (Field.PASSWORD, ErrorCode.INVALID_TYPE): "El campo password debe ser una cadena de texto.",
    (Field.PASSWORD, ErrorCode.TOO_SHORT): "La contraseña debe tener al menos 8 caracteres.",
    (Field.PASSWORD, ErrorCode.TOO_LONG): "La contraseña no puede tener más de 50 caracteres.",
    (Field.PASSWORD, ErrorCode.MISSING_UPPERCASE): (
        "La contraseña debe contener al menos una mayúscula."
    ),
    (Field.PASSWORD, ErrorCode.MISSING_LOWERCASE): (
        "La contraseña debe contener al menos una minúscula."
    ),
    (Field.PASSWORD, ErrorCode.MISSING_NUMBER): "La contraseña debe contener al menos un número.",
    (Field.PASSWORD, ErrorCode.MISSING_SPECIAL_CHARACTER): (
        "La contraseña debe contener al menos un carácter especial."
    ),
    (Field.ID, ErrorCode.EMPTY): "Error interno: ID de usuario no generado.",
    (Field.ID, ErrorCode.INVALID_FORMAT): "El ID de usuario tiene un formato inválido.",
}


@dataclass(frozen=True)
class MessageCatalog:
    """Texts for one locale."""

    locale: str
    field_messages: dict[tuple[Field, ErrorCode], str]
    validation_error: str
    registered_success: str
    unexpected_error: str
    password_confirmation_mismatch: str

    def for_code(self, field: Field, code: ErrorCode) -> str:
        try:
            return self.field_messages[(field, code)]
        except KeyError:
            raise UnmappedErrorCode(field, code, self.locale) from None

    def missing_pairs(self) -> list[tuple[Field, ErrorCode]]:
        """Pairs a field can produce that have no message."""
        return [
            (field, code)
            for field, codes in FIELD_ERROR_CODES.items()
            for code in codes
            if (field, code) not in self.field_messages
        ]


CATALOGS: dict[str, MessageCatalog] = {
    "en": MessageCatalog(
        locale="en",
        field_messages=_EN_FIELD_MESSAGES,
        validation_error="Validation error. Please check the provided fields.",
        registered_success="User registered successfully.",
        unexpected_error="An unexpected error occurred. Please try again later.",
        password_confirmation_mismatch="The password confirmation does not match.",
    ),
    "es": MessageCatalog(
        locale="es",
        field_messages=_ES_FIELD_MESSAGES,
        validation_error="Error de validación. Por favor, revisa los campos proporcionados.",
        registered_success="Usuario registrado exitosamente.",
        unexpected_error=(
            "Ha ocurrido un error inesperado. Por favor, inténtalo de nuevo más tarde."
        ),
        password_confirmation_mismatch="La confirmación de la contraseña no coincide.",
    ),
}


def get_catalog(locale: str) -> MessageCatalog:
    """Return the catalog for ``locale``; unknown locales are a configuration error."""
    try:
        return CATALOGS[locale]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale!r}") from None
