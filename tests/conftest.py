from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from goal_planner import create_app
from goal_planner.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings())
    with app.test_client() as test_client:
        yield test_client
