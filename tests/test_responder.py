from media_server.modules.assets import ByteRange, plan_response


def test_plan_without_range_is_full_content():
    plan = plan_response(1000, None)
    assert plan.status_code == 200
    assert plan.byte_range is None
    assert plan.headers["Content-Length"] == "1000"
    assert plan.headers["Content-Type"] == "video/mp4"


def test_plan_blank_range_header_is_treated_as_absent():
    assert plan_response(1000, "   ").status_code == 200


def test_plan_partial_content():
    plan = plan_response(1000, "bytes=200-499")
    assert plan.status_code == 206
    assert plan.byte_range == ByteRange(200, 499)
    assert plan.headers == {
        "Content-Range": "bytes 200-499/1000",
        "Accept-Ranges": "bytes",
        "Content-Length": "300",
        "Content-Type": "video/mp4",
    }


def test_plan_open_ended_range():
    plan = plan_response(1000, "bytes=900-")
    assert plan.status_code == 206
    assert plan.headers["Content-Range"] == "bytes 900-999/1000"
    assert plan.headers["Content-Length"] == "100"


def test_plan_out_of_bounds_is_416_without_body():
    plan = plan_response(1000, "bytes=1500-1999")
    assert plan.status_code == 416
    assert plan.byte_range is None
    assert not plan.has_body
    assert plan.headers["Content-Range"] == "bytes */1000"


def test_plan_malformed_range_is_416():
    assert plan_response(1000, "garbage").status_code == 416
