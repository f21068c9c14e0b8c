"""Tests for the response envelope models."""

from employee_directory.record_store import StoreResponse


def test_split_results_partitions_by_success():
    response = StoreResponse.model_validate(
        {
            "success": True,
            "results": [
                {"success": True, "data": {"Id": 1}},
                {"success": False, "message": "Duplicate email"},
                {"success": True, "data": {"Id": 2}},
            ],
        }
    )
    successful, failed = response.split_results()
    assert [r.data["Id"] for r in successful] == [1, 2]
    assert [r.message for r in failed] == ["Duplicate email"]


def test_split_results_without_results():
    assert StoreResponse(success=True).split_results() == ([], [])


def test_field_errors_read_store_labels():
    response = StoreResponse.model_validate(
        {
            "success": True,
            "results": [
                {
                    "success": False,
                    "errors": [{"fieldLabel": "Email", "message": "is invalid"}],
                }
            ],
        }
    )
    error = response.results[0].errors[0]
    assert error.field_label == "Email"
    assert str(error) == "Email: is invalid"


def test_unknown_keys_are_tolerated():
    response = StoreResponse.model_validate({"success": True, "data": [], "total": 0})
    assert response.success is True
    assert response.results is None
