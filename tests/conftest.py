import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def dictionary():
    from fullname_parser.dictionary import Dictionary

    return Dictionary.create_default()


@pytest.fixture
def parser():
    from fullname_parser.parsing import FullNameParser

    return FullNameParser()
