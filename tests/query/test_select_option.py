import pytest

from sqlport.query import SelectOption


def test_defaults_mean_no_window():
    option = SelectOption()
    assert option.offset == 0
    assert option.limit == 0
    assert not option.has_offset
    assert not option.has_limit


def test_starting_at_converts_to_zero_based_offset():
    assert SelectOption.starting_at(5, 10) == SelectOption(offset=4, limit=10)
    assert SelectOption.starting_at(1) == SelectOption()


@pytest.mark.parametrize("offset,limit", [(-1, 0), (0, -1)])
def test_negative_values_rejected(offset, limit):
    with pytest.raises(ValueError):
        SelectOption(offset, limit)


def test_non_integer_values_rejected():
    with pytest.raises(ValueError):
        SelectOption(1.5, 0)
    with pytest.raises(ValueError):
        SelectOption(True, 0)


def test_start_position_is_one_based():
    with pytest.raises(ValueError):
        SelectOption.starting_at(0, 10)


def test_select_option_is_immutable():
    option = SelectOption(1, 2)
    with pytest.raises(AttributeError):
        option.offset = 3
