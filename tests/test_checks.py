"""
Тесты проверки аргументов
"""

import pytest

from common_api.lib.checks import (
    check_argument_type,
    check_criteria_argument,
    check_id_argument_type,
    check_id_array_argument_type,
    check_object_argument,
    check_page_request_argument,
    check_sort_request_argument,
)
from common_api.lib.models import NOTSET, CriteriaDefinition
from common_api.models import App, Feedback, PageRequest, SortOrder, SortRequest, State


class TestCheckArgumentType:
    """Тесты базовой проверки типа"""

    def test_accepts_matching_type(self):
        check_argument_type("name", "demo", str)
        check_argument_type("count", 3, (int, float))

    def test_rejects_none_unless_nullable(self):
        with pytest.raises(TypeError, match="The value of the argument 'name' cannot be None."):
            check_argument_type("name", None, str)
        check_argument_type("name", None, str, nullable=True)

    def test_notset_treated_as_none(self):
        with pytest.raises(TypeError):
            check_argument_type("name", NOTSET, str)
        check_argument_type("name", NOTSET, str, nullable=True)

    def test_bool_is_not_a_number(self):
        with pytest.raises(TypeError) as exc_info:
            check_argument_type("count", True, int)
        assert str(exc_info.value) == "The argument 'count' must be of type int, but it is bool."

    def test_wrong_type_message(self):
        with pytest.raises(TypeError) as exc_info:
            check_argument_type("state", 1, (State, str))
        assert "must be of type State|str, but it is int" in str(exc_info.value)


class TestIdChecks:
    """Тесты проверки идентификаторов"""

    def test_valid_ids(self):
        check_id_argument_type(1)
        check_id_argument_type("abc")

    @pytest.mark.parametrize("value", [None, 1.5, True, [1]])
    def test_invalid_ids(self, value):
        with pytest.raises(TypeError):
            check_id_argument_type(value)

    def test_custom_name_in_message(self):
        with pytest.raises(TypeError, match="'user_id'"):
            check_id_argument_type(None, "user_id")

    def test_id_array(self):
        check_id_array_argument_type([1, "2"])
        check_id_array_argument_type(())

    def test_id_array_reports_element_index(self):
        with pytest.raises(TypeError, match=r"'ids\[1\]'"):
            check_id_array_argument_type([1, None])

    def test_id_array_must_be_sequence(self):
        with pytest.raises(TypeError):
            check_id_array_argument_type("123")


class TestPageAndSortRequest:
    """Тесты проверки запросов страницы и сортировки"""

    def test_page_request_model_and_mapping(self):
        check_page_request_argument(PageRequest(page_index=0, page_size=20))
        check_page_request_argument({"page_index": 1})
        check_page_request_argument({})

    def test_page_request_rejects_bad_values(self):
        with pytest.raises(TypeError):
            check_page_request_argument({"page_size": "10"})
        with pytest.raises(TypeError, match="cannot be negative"):
            check_page_request_argument({"page_index": -1})
        with pytest.raises(TypeError):
            check_page_request_argument([0, 10])

    def test_sort_request_against_entity_fields(self):
        check_sort_request_argument(SortRequest(sort_field="name", sort_order=SortOrder.ASC), App)
        with pytest.raises(TypeError, match="is not a field of the class App"):
            check_sort_request_argument({"sort_field": "unknown"}, App)

    def test_sort_request_without_class(self):
        check_sort_request_argument({"sort_field": "anything", "sort_order": "DESC"})
        with pytest.raises(TypeError):
            check_sort_request_argument({"sort_order": 1})


class TestCriteriaChecks:
    """Тесты проверки критериев фильтрации"""

    definitions = (
        CriteriaDefinition("name", str),
        CriteriaDefinition("state", (State, str)),
        CriteriaDefinition("deleted", bool),
    )

    def test_declared_fields_pass(self):
        check_object_argument(
            "criteria", {"name": "a", "state": State.NORMAL, "deleted": False}, self.definitions
        )

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError) as exc_info:
            check_object_argument("criteria", {"code": "x"}, self.definitions)
        assert str(exc_info.value) == 'Unsupported field: "criteria.code"'

    def test_empty_values_are_skipped(self):
        check_object_argument("criteria", {"code": None}, self.definitions)

    def test_field_type_checked(self):
        with pytest.raises(TypeError, match="criteria.deleted"):
            check_object_argument("criteria", {"deleted": "no"}, self.definitions)

    def test_no_definitions_accepts_anything(self):
        check_criteria_argument({"anything": 1})
        check_criteria_argument({"anything": 1}, ())

    def test_empty_criteria_accepted(self):
        check_criteria_argument({}, self.definitions)

    def test_none_criteria_rejected(self):
        with pytest.raises(TypeError):
            check_criteria_argument(None, self.definitions)

    def test_class_based_criteria(self):
        check_criteria_argument({"title": "help"}, Feedback)
        with pytest.raises(TypeError, match='"criteria.bogus"'):
            check_criteria_argument({"bogus": 1}, Feedback)
