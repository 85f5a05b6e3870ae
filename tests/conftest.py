import pytest

from quest.cases.mansion import load_case, parse_case


@pytest.fixture(scope="session")
def mansion_case():
    return load_case()


@pytest.fixture
def small_case():
    return parse_case(
        {
            "case_id": "cottage",
            "root": "Porch",
            "table_size": 7,
            "rooms": [
                {"name": "Porch", "left": "Hall", "right": "Shed"},
                {"name": "Hall", "right": "Attic"},
                {"name": "Shed"},
                {"name": "Attic"},
            ],
            "clues": {
                "Porch": "muddy boots",
                "Hall": "torn letter",
                "Attic": "muddy boots",
            },
            "suspects": [
                {"clue": "muddy boots", "suspect": "Butler"},
            ],
        }
    )
