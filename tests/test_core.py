"""
Unit Tests for configuration, logging and the exception hierarchy.
"""
import json
import logging

import pytest
from pydantic import ValidationError

from store_api.core.config import DatabaseType, Environment, LogFormat, Settings
from store_api.core.exceptions import (
    BaseApplicationException,
    ConfigurationException,
    FieldNotFoundException,
    NotFoundException,
    ValidationException,
)
from store_api.core.logging import JSONFormatter, get_logger_with_context, setup_logging
from store_api.domain.value_objects import (
    CustomerSearchCriteria,
    SaleSearchCriteria,
    is_present,
)


class TestSettings:
    def test_defaults(self):
        config = Settings(_env_file=None)

        assert config.environment is Environment.DEVELOPMENT
        assert config.database_type is DatabaseType.SQLITE
        assert config.api_prefix == "/api/v1"
        assert config.default_page_size == 10
        assert config.is_sqlite

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_log_format_is_case_insensitive(self):
        assert Settings(_env_file=None, log_format="JSON").log_format is LogFormat.JSON

    def test_database_type_follows_the_url(self):
        config = Settings(_env_file=None, database_url="postgresql://store@localhost/store")

        assert config.database_type is DatabaseType.POSTGRESQL
        assert not config.is_sqlite

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_environment_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
        monkeypatch.setenv("ENVIRONMENT", "production")

        config = Settings(_env_file=None)

        assert config.default_page_size == 25
        assert config.is_production

    def test_sqlite_parent_directory_is_created(self, tmp_path):
        db_file = tmp_path / "nested" / "store.db"
        config = Settings(_env_file=None, database_url=f"sqlite:///{db_file}")

        assert config.get_database_url() == f"sqlite:///{db_file}"
        assert db_file.parent.is_dir()


class TestLogging:
    def test_json_formatter_includes_extra_fields(self):
        record = logging.LogRecord(
            "store_api.test", logging.INFO, __file__, 10, "hello %s", ("world",), None
        )
        record.request_id = "abc"

        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["request_id"] == "abc"

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "store.log"
        logger = setup_logging("store_api.test.file", level="DEBUG", log_file=log_file, use_json=True)

        logger.debug("written")
        for handler in logger.handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written"

    def test_yaml_config_takes_over(self, tmp_path, monkeypatch):
        config_file = tmp_path / "logging.yaml"
        config_file.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  store_api.test.yaml:\n"
            "    level: WARNING\n"
        )
        monkeypatch.setattr("store_api.core.logging.settings.log_config_path", config_file)

        logger = setup_logging("store_api.test.yaml")

        assert logger.level == logging.WARNING

    def test_invalid_yaml_config_is_a_configuration_error(self, tmp_path, monkeypatch):
        config_file = tmp_path / "logging.yaml"
        config_file.write_text("version: 1\nhandlers:\n  broken:\n    class: no.such.Handler\n")
        monkeypatch.setattr("store_api.core.logging.settings.log_config_path", config_file)

        with pytest.raises(ConfigurationException):
            setup_logging("store_api.test.broken")

    def test_context_adapter_merges_extra(self):
        adapter = get_logger_with_context("store_api.test.context", path="/x")

        msg, kwargs = adapter.process("message", {"extra": {"status_code": 404}})

        assert msg == "message"
        assert kwargs["extra"] == {"status_code": 404, "path": "/x"}


class TestExceptions:
    def test_to_dict(self):
        error = NotFoundException("Customer 1 not found", details={"id": "1"})

        assert error.to_dict() == {
            "error": "NotFoundException",
            "message": "Customer 1 not found",
            "details": {"id": "1"},
        }

    def test_field_not_found_is_a_validation_error(self):
        error = FieldNotFoundException("Product", "colour", allowed=["name", "price"])

        assert isinstance(error, ValidationException)
        assert isinstance(error, BaseApplicationException)
        assert error.details == {
            "entity": "Product",
            "allowed": ["name", "price"],
            "field": "sort_field",
            "value": "colour",
        }


class TestCriteria:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, False), ("", False), ((), False), ("x", True), (0, True), ([1], True)],
    )
    def test_is_present(self, value, expected):
        assert is_present(value) is expected

    def test_present_filters_skip_control_fields(self):
        criteria = CustomerSearchCriteria(name="Ann", dni="", sort_field="name", page_size=5)

        assert criteria.present_filters() == {"name": "Ann"}

    def test_criteria_are_immutable(self):
        criteria = SaleSearchCriteria(customer_name="doe")

        with pytest.raises(AttributeError):
            criteria.customer_name = "other"

    def test_pagination_defaults(self):
        criteria = SaleSearchCriteria()

        assert (criteria.page_actual, criteria.page_size) == (0, 10)
        assert criteria.product_ids == ()
