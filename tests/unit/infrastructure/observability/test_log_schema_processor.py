from mr_mirror.infrastructure.observability.logging import log_schema_processor


def test_groups_merge_request_fields():
    event = {
        "event": "Mirror workflow started",
        "level": "info",
        "correlation_id": "abc",
        "mr_iid": 42,
        "target_branch": "MASTER",
        "downstream_branch": "Branch_v2.1.1",
        "commit_count": 3,
    }

    result = log_schema_processor(None, "info", event)

    assert result["message"] == "Mirror workflow started"
    assert result["correlation_id"] == "abc"
    assert result["merge_request"] == {
        "mr_iid": 42,
        "target_branch": "MASTER",
        "downstream_branch": "Branch_v2.1.1",
    }
    assert result["extra"] == {"commit_count": 3}
    assert "error" not in result


def test_error_block_only_when_error_type_bound():
    result = log_schema_processor(
        None,
        "error",
        {"event": "Mirror workflow aborted", "error_type": "BranchCreationError", "error_details": "exists"},
    )

    assert result["error"] == {
        "type": "BranchCreationError",
        "details": "exists",
        "status_code": None,
        "retryable": False,
    }
    assert "extra" not in result


def test_remote_status_code_lands_in_error_block():
    result = log_schema_processor(
        None,
        "warning",
        {
            "event": "Cherry-pick failed, remaining commits skipped",
            "error_type": "CherryPickFailure",
            "error_status_code": 400,
            "fail_index": 1,
        },
    )

    assert result["error"]["status_code"] == 400
    assert result["extra"] == {"fail_index": 1}
