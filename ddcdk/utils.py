#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import hashlib
import logging
import os

from ddcdk import constants


class DatadogCdkUtils:
    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        if not logger.handlers:
            logger.addHandler(logging.StreamHandler())
        DatadogCdkUtils.configure_logger(logger)
        return logger

    @staticmethod
    def configure_logger(logger: logging.Logger) -> None:
        """
        Switch the logger to DEBUG when DD_CONSTRUCT_DEBUG_LOGS is "true".
        """
        if DatadogCdkUtils.debug_logs_enabled():
            logger.setLevel(logging.DEBUG)
        else:
            logger.setLevel(logging.INFO)

    @staticmethod
    def refresh_loggers() -> None:
        """
        Re-apply DD_CONSTRUCT_DEBUG_LOGS to every ddcdk logger created so far.
        """
        for name, logger in logging.Logger.manager.loggerDict.items():
            if name.split(".")[0] == "ddcdk" and isinstance(logger, logging.Logger):
                DatadogCdkUtils.configure_logger(logger)

    @staticmethod
    def debug_logs_enabled() -> bool:
        value = os.environ.get(constants.DEBUG_LOGS_ENV_VAR, "")
        return value.lower() == "true"

    @staticmethod
    def sha256(*values: str) -> str:
        digest = hashlib.sha256()
        for value in values:
            digest.update(value.encode("utf-8"))
        return digest.hexdigest()
