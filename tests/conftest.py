import json

import pytest

from isa_model import load_isa
from isa_helpers import make_isa_doc


@pytest.fixture
def isa_doc():
    return make_isa_doc()

@pytest.fixture
def isa():
    return load_isa(json.dumps(make_isa_doc()))
