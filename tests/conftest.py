import pytest
from loguru import logger

from DriftProximity.utils.geo_utils import Coordinate

BIG_SUR = Coordinate(36.2704, -121.8081)
SEATTLE = Coordinate(47.6062, -122.3321)
PORTLAND = Coordinate(45.5152, -122.6784)


@pytest.fixture
def log_records():
    """Capture everything loguru emits during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)
