"""
Tests for the shared logger factory.
"""

import logging

from career_compass.utils.logging import get_logger


class TestGetLogger:

    def test_single_handler_and_no_propagation(self):
        logger = get_logger("career_compass.tests.single_handler")
        again = get_logger("career_compass.tests.single_handler")

        assert logger is again
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_explicit_level(self):
        logger = get_logger("career_compass.tests.explicit_level", level=logging.WARNING)

        assert logger.level == logging.WARNING
