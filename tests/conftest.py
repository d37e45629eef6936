import pytest

import multitap


# Every key with its full character sequence, e.g.
#
#   def test_something(keypad_keys):
#       for key, letters in keypad_keys: ...
#
@pytest.fixture(scope="session")
def keypad_keys():
    return list(multitap.KEYPAD.items())
