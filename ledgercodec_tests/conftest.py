import os

from ledgercodec.conf import UNITTESTS_SETTINGS_FILEPATH
from ledgercodec.conf.get_settings import CONFIG_YAML_ENV_VAR
from ledgercodec.logging import LoggingOutput, setup_logging

os.environ[CONFIG_YAML_ENV_VAR] = os.environ.get('LEDGERCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

setup_logging(LoggingOutput.NULL, debug=True)
