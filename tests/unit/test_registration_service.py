"""
Unit tests for RegistrationService domain logic.

Tests domain logic with mocked ports to verify:
- All fields are validated without short-circuiting
- Uniqueness is only checked for well-formed emails
- Persistence happens exactly once, only for valid input
- Persistence failures propagate unchanged
"""

import re
from unittest.mock import Mock

import pytest

from src.domain.errors import ErrorCode, Field
from src.domain.exceptions import PersistenceError
from src.domain.registration import Registered, RegistrationRejected, RegistrationService
from src.domain.user import User
from tests.conftest import FIXED_USER_ID, VALID_EMAIL, VALID_NAME, VALID_PASSWORD

UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class TestSuccessfulRegistration:
    """Tests for the success path."""

    def test_returns_registered_user(self, service: RegistrationService) -> None:
        """Valid input with a free email returns Registered."""
        outcome = service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        assert isinstance(outcome, Registered)
        assert isinstance(outcome.user, User)

    def test_saves_exactly_once(self, service: RegistrationService, repository: Mock) -> None:
        """The repository receives the new user exactly once."""
        outcome = service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        repository.save.assert_called_once_with(outcome.user)

    def test_user_carries_trimmed_inputs(self, service: RegistrationService) -> None:
        """Name and email equal the trimmed inputs."""
        outcome = service.register("  John Doe ", "  john@example.com ", VALID_PASSWORD)

        assert isinstance(outcome, Registered)
        assert outcome.user.name.value == "John Doe"
        assert outcome.user.email.value == "john@example.com"
        assert outcome.user.password.value == VALID_PASSWORD

    def test_user_id_comes_from_generator(
        self, service: RegistrationService, id_generator: Mock
    ) -> None:
        """The id is generated once per registration."""
        outcome = service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        id_generator.generate.assert_called_once_with()
        assert outcome.user.id.value == FIXED_USER_ID

    def test_real_generator_produces_uuid4(self, uniqueness_checker: Mock, repository: Mock) -> None:
        """With the uuid4 adapter the id matches the v4 grammar."""
        from src.adapters.identity.uuid_generator import Uuid4Generator

        service = RegistrationService(
            uniqueness_checker=uniqueness_checker,
            repository=repository,
            id_generator=Uuid4Generator(),
        )
        outcome = service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        assert UUID4_PATTERN.match(outcome.user.id.value)

    def test_uniqueness_checked_with_validated_email(
        self, service: RegistrationService, uniqueness_checker: Mock
    ) -> None:
        """The checker receives the parsed Email value object."""
        service.register(VALID_NAME, "  John@Example.com ", VALID_PASSWORD)

        (email,), _ = uniqueness_checker.exists.call_args
        assert email.value == "John@Example.com"
        assert email.normalized == "john@example.com"


class TestValidationAggregation:
    """Tests for no short-circuit across fields."""

    def test_all_fields_reported_together(
        self, service: RegistrationService, repository: Mock
    ) -> None:
        """Empty name, bad email and weak password are all reported at once."""
        outcome = service.register("", "bad", "weak")

        assert isinstance(outcome, RegistrationRejected)
        assert list(outcome.report) == [Field.NAME, Field.EMAIL, Field.PASSWORD]
        repository.save.assert_not_called()

    def test_all_empty_reports_three_keys(
        self, service: RegistrationService, repository: Mock
    ) -> None:
        """All-empty input yields exactly name, email and password keys."""
        outcome = service.register("", "", "")

        assert isinstance(outcome, RegistrationRejected)
        assert outcome.report.as_dict() == {
            "name": ["EMPTY"],
            "email": ["EMPTY"],
            "password": ["EMPTY"],
        }
        repository.save.assert_not_called()

    def test_name_too_long_only(self, service: RegistrationService, repository: Mock) -> None:
        """A 101-character name is the only reported failure."""
        outcome = service.register("a" * 101, VALID_EMAIL, VALID_PASSWORD)

        assert isinstance(outcome, RegistrationRejected)
        assert dict(outcome.report) == {Field.NAME: (ErrorCode.TOO_LONG,)}
        repository.save.assert_not_called()

    def test_password_failures_accumulate(self, service: RegistrationService) -> None:
        """Seven lowercase letters reports every password rule that fails."""
        outcome = service.register(VALID_NAME, VALID_EMAIL, "aaaaaaa")

        assert isinstance(outcome, RegistrationRejected)
        assert set(outcome.report[Field.PASSWORD]) >= {
            ErrorCode.TOO_SHORT,
            ErrorCode.MISSING_UPPERCASE,
            ErrorCode.MISSING_NUMBER,
            ErrorCode.MISSING_SPECIAL_CHARACTER,
        }

    def test_register_is_idempotent_for_rejections(self, service: RegistrationService) -> None:
        """The same invalid input produces the same report twice."""
        first = service.register("A!", "bad", "weak")
        second = service.register("A!", "bad", "weak")

        assert first == second

    def test_non_text_field_reported_with_others(
        self, service: RegistrationService, uniqueness_checker: Mock
    ) -> None:
        """A non-string name is reported while email and password are still validated."""
        outcome = service.register(123, "bad", "weak")

        assert isinstance(outcome, RegistrationRejected)
        assert outcome.report[Field.NAME] == (ErrorCode.INVALID_TYPE,)
        assert list(outcome.report) == [Field.NAME, Field.EMAIL, Field.PASSWORD]
        uniqueness_checker.exists.assert_not_called()


class TestUniquenessCheck:
    """Tests for the duplicate-email path."""

    def test_duplicate_email_only(
        self, service: RegistrationService, uniqueness_checker: Mock, repository: Mock
    ) -> None:
        """A taken email with otherwise valid input reports only email."""
        uniqueness_checker.exists.return_value = True

        outcome = service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        assert isinstance(outcome, RegistrationRejected)
        assert dict(outcome.report) == {Field.EMAIL: (ErrorCode.EMAIL_ALREADY_EXISTS,)}
        repository.save.assert_not_called()

    def test_duplicate_email_merged_with_other_field_errors(
        self, service: RegistrationService, uniqueness_checker: Mock
    ) -> None:
        """A taken email is reported alongside failures in other fields."""
        uniqueness_checker.exists.return_value = True

        outcome = service.register("", VALID_EMAIL, "weak")

        assert isinstance(outcome, RegistrationRejected)
        assert list(outcome.report) == [Field.NAME, Field.EMAIL, Field.PASSWORD]
        assert outcome.report[Field.EMAIL] == (ErrorCode.EMAIL_ALREADY_EXISTS,)

    def test_checker_not_called_for_invalid_email(
        self, service: RegistrationService, uniqueness_checker: Mock
    ) -> None:
        """An email that fails format validation is never looked up."""
        service.register(VALID_NAME, "not-an-email", VALID_PASSWORD)

        assert uniqueness_checker.exists.call_count == 0

    def test_checker_not_called_for_empty_email(
        self, service: RegistrationService, uniqueness_checker: Mock
    ) -> None:
        """An empty email is never looked up."""
        service.register(VALID_NAME, "", VALID_PASSWORD)

        uniqueness_checker.exists.assert_not_called()

    def test_checker_called_even_when_other_fields_fail(
        self, service: RegistrationService, uniqueness_checker: Mock
    ) -> None:
        """Uniqueness depends only on the email's own validity."""
        service.register("", VALID_EMAIL, "")

        uniqueness_checker.exists.assert_called_once()


class TestPersistenceFailure:
    """Tests for storage failures."""

    def test_persistence_error_propagates(
        self, service: RegistrationService, repository: Mock
    ) -> None:
        """A failing save is not converted into a validation outcome."""
        repository.save.side_effect = PersistenceError("User already stored")

        with pytest.raises(PersistenceError):
            service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

    def test_persistence_error_is_not_retried(
        self, service: RegistrationService, repository: Mock
    ) -> None:
        """The repository is called once even when it fails."""
        repository.save.side_effect = PersistenceError("User insert failed")

        with pytest.raises(PersistenceError):
            service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        repository.save.assert_called_once()

    def test_uniqueness_lookup_error_propagates(
        self, service: RegistrationService, uniqueness_checker: Mock, repository: Mock
    ) -> None:
        """A failing lookup propagates and nothing is saved."""
        uniqueness_checker.exists.side_effect = PersistenceError("User lookup failed")

        with pytest.raises(PersistenceError):
            service.register(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        repository.save.assert_not_called()


class TestValidateOnly:
    """Tests for validate() without persistence."""

    def test_validate_returns_empty_report_for_valid_input(
        self, service: RegistrationService, repository: Mock
    ) -> None:
        """Valid input yields an empty report and nothing is saved."""
        report = service.validate(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        assert not report
        repository.save.assert_not_called()

    def test_validate_includes_duplicate_email(
        self, service: RegistrationService, uniqueness_checker: Mock
    ) -> None:
        """validate() runs the uniqueness check too."""
        uniqueness_checker.exists.return_value = True

        report = service.validate(VALID_NAME, VALID_EMAIL, VALID_PASSWORD)

        assert report.as_dict() == {"email": ["EMAIL_ALREADY_EXISTS"]}
