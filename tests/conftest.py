import pytest
from loguru import logger

from primepairs import log


@pytest.fixture(autouse=True)
def _drop_cli_log_sink():
    # cli.main() binds a sink to the captured stderr of the running test
    yield
    if log._SINK_ID is not None:
        logger.remove(log._SINK_ID)
        log._SINK_ID = None
