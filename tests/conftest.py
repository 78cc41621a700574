import pytest

from DeskCalc import Session


@pytest.fixture
def session():
    return Session.CalculatorSession()


@pytest.fixture
def type_keys(session):
    """Feed a string of key characters into the session, one action per character."""
    def _type(keys):
        for key in keys:
            session.press_key(key)
        return session
    return _type


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "calculator_config.json"
