"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from nutriplan.app_logging import LOGGER_NAME, configure_logging
from nutriplan.plans.external import CalculatedData, parse_external_plan
from nutriplan.templates.catalog import default_catalog, load_catalog, save_catalog


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


class TestConfigureLogging:
    def test_single_handler(self, clean_logger):
        configure_logging()
        configure_logging()
        assert len(clean_logger.handlers) == 1
        assert clean_logger.propagate is False

    def test_levels(self, clean_logger):
        configure_logging()
        assert clean_logger.level == logging.WARNING
        configure_logging(verbose=True)
        assert clean_logger.level == logging.DEBUG

    def test_module_loggers_are_children(self, clean_logger):
        configure_logging()
        child = logging.getLogger("nutriplan.plans.generator")
        assert child.getEffectiveLevel() == logging.WARNING


class TestLibraryLogLevels:
    """Library code reports through DEBUG only."""

    def test_catalog_and_plan_parsing(self, clean_logger, caplog, tmp_path, female_profile, plan_response):
        clean_logger.propagate = True
        path = tmp_path / "catalog.yaml"
        save_catalog(default_catalog(), path)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            load_catalog(path)
            parse_external_plan(plan_response, CalculatedData.for_profile(female_profile))

        assert caplog.records
        assert {record.levelno for record in caplog.records} == {logging.DEBUG}
