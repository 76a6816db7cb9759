import pytest

from comic_book_manager.models import Entity


def test_choices_keep_declaration_order():
    assert Entity.choices() == (
        "publishers", "series", "issues", "characters", "creators", "events")


@pytest.mark.parametrize("name", Entity.choices())
def test_parse_known_names(name):
    entity = Entity.parse(name)
    assert entity.value == name
    assert str(entity) == name


@pytest.mark.parametrize("name", ["villains", "Publishers", "", "issue"])
def test_parse_unknown_names_raise(name):
    with pytest.raises(ValueError):
        Entity.parse(name)
