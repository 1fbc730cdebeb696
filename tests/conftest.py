import pytest

from tests.helpers import split_document


@pytest.fixture()
def henry():
    return split_document('Henry is bad at golf')


@pytest.fixture()
def around():
    return split_document('What goes around comes around')
