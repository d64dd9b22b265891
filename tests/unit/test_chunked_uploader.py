import io
import json
import math

import pytest
import requests

from fakes import FakeResponse, RecordingSession
from gridwalk_common.uploader import (
    CHUNK_SIZE,
    ChunkedUploader,
    plan_chunks,
    progress_percent,
)

MiB = 1024 * 1024
ENDPOINT = "http://web.test/api/upload/layer"


def _ok(payload=None):
    return FakeResponse(200, payload or {"success": True, "data": {"id": "layer-1"}})


class Recorder:
    def __init__(self):
        self.progress = []
        self.successes = []
        self.errors = []

    def callbacks(self):
        return {
            "on_progress": self.progress.append,
            "on_success": self.successes.append,
            "on_error": self.errors.append,
        }


@pytest.mark.parametrize("size", [1, 14, 15, 16, 29, 30, 31, 100])
def test_plan_chunks_partitions_the_file(size):
    ranges = plan_chunks(size, 15)

    assert len(ranges) == math.ceil(size / 15)
    assert ranges[0][0] == 0
    assert ranges[-1][1] == size
    for (_, end), (start, _) in zip(ranges, ranges[1:]):
        assert end == start
    assert all(end - start <= 15 for start, end in ranges)


def test_plan_chunks_for_32_mib_file_with_default_chunk_size():
    sizes = [end - start for start, end in plan_chunks(32 * MiB)]

    assert CHUNK_SIZE == 15 * MiB
    assert sizes == [15 * MiB, 15 * MiB, 2 * MiB]


def test_plan_chunks_rejects_non_positive_chunk_size():
    with pytest.raises(ValueError):
        plan_chunks(10, 0)


def test_progress_percent_rounds_half_up():
    assert progress_percent(1, 8) == 13
    assert progress_percent(1, 3) == 33
    assert progress_percent(2, 3) == 67
    assert progress_percent(3, 3) == 100


def test_upload_sends_chunks_in_order_with_chunk_info():
    content = bytes(range(32))
    session = RecordingSession([_ok(), _ok(), _ok({"success": True, "data": {"id": "final"}})])
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=15)
    recorder = Recorder()

    result = uploader.upload(
        io.BytesIO(content), "roads.geojson", len(content), "ws-1", **recorder.callbacks()
    )

    assert len(session.calls) == 3
    sent = b""
    for index, (url, kwargs) in enumerate(session.calls):
        assert url == ENDPOINT
        name, data, _ = kwargs["files"]["file"]
        assert name == "roads.geojson"
        sent += data
        assert kwargs["data"]["workspace_id"] == "ws-1"
        assert json.loads(kwargs["data"]["chunk_info"]) == {
            "currentChunk": index,
            "totalChunks": 3,
            "fileSize": 32,
        }
    assert sent == content
    assert [len(kwargs["files"]["file"][1]) for _, kwargs in session.calls] == [15, 15, 2]
    assert recorder.progress == [33, 67, 100]
    assert recorder.successes == [{"success": True, "data": {"id": "final"}}]
    assert recorder.errors == []
    assert result == {"success": True, "data": {"id": "final"}}


def test_upload_stops_at_first_rejected_chunk():
    session = RecordingSession(
        [_ok(), FakeResponse(200, {"success": False, "error": "Disk full"}), _ok()]
    )
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=10)
    recorder = Recorder()

    result = uploader.upload(io.BytesIO(b"x" * 25), "a.csv", 25, "ws-1", **recorder.callbacks())

    assert result is None
    assert len(session.calls) == 2
    assert recorder.errors == ["Disk full"]
    assert recorder.successes == []
    assert recorder.progress == [33]


def test_upload_accepts_2xx_bodies_without_success_flag():
    session = RecordingSession([FakeResponse(200, {"id": "a"}), FakeResponse(200, {"id": "b"})])
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=10)
    recorder = Recorder()

    result = uploader.upload(io.BytesIO(b"x" * 15), "a.csv", 15, "ws-1", **recorder.callbacks())

    assert len(session.calls) == 2
    assert recorder.errors == []
    assert recorder.progress == [50, 100]
    assert recorder.successes == [{"id": "b"}]
    assert result == {"id": "b"}


def test_upload_stops_when_middle_chunk_returns_server_error():
    session = RecordingSession(
        [
            _ok(),
            FakeResponse(500, {"success": False, "error": "Internal server error during upload"}),
            _ok(),
        ]
    )
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=10)
    recorder = Recorder()

    result = uploader.upload(io.BytesIO(b"x" * 25), "a.csv", 25, "ws-1", **recorder.callbacks())

    assert result is None
    assert len(session.calls) == 2
    assert recorder.errors == ["Internal server error during upload"]
    assert recorder.progress == [33]
    assert recorder.successes == []


def test_upload_reports_text_body_of_non_json_error():
    session = RecordingSession([FakeResponse(413, text="Request Entity Too Large\n")])
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=10)
    recorder = Recorder()

    uploader.upload(io.BytesIO(b"x" * 5), "a.csv", 5, "ws-1", **recorder.callbacks())

    assert recorder.errors == ["Request Entity Too Large"]


def test_upload_reports_status_when_error_body_is_empty():
    session = RecordingSession([FakeResponse(502, text="")])
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=10)
    recorder = Recorder()

    uploader.upload(io.BytesIO(b"x" * 5), "a.csv", 5, "ws-1", **recorder.callbacks())

    assert recorder.errors == ["Upload failed: 502"]


def test_upload_rejects_2xx_body_that_is_not_json():
    session = RecordingSession([FakeResponse(200, text="<html>ok</html>"), _ok()])
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=10)
    recorder = Recorder()

    result = uploader.upload(io.BytesIO(b"x" * 15), "a.csv", 15, "ws-1", **recorder.callbacks())

    assert result is None
    assert len(session.calls) == 1
    assert recorder.errors == ["Upload failed: 200"]


def test_upload_uses_error_field_of_non_2xx_response():
    session = RecordingSession([FakeResponse(400, {"success": False, "error": "Unsupported file type: .txt"})])
    uploader = ChunkedUploader(session, ENDPOINT)
    recorder = Recorder()

    uploader.upload(io.BytesIO(b"abc"), "a.txt", 3, "ws-1", **recorder.callbacks())

    assert recorder.errors == ["Unsupported file type: .txt"]


def test_upload_surfaces_network_errors_once():
    session = RecordingSession([requests.ConnectionError("connection refused")])
    uploader = ChunkedUploader(session, ENDPOINT, chunk_size=10)
    recorder = Recorder()

    result = uploader.upload(io.BytesIO(b"x" * 30), "a.csv", 30, "ws-1", **recorder.callbacks())

    assert result is None
    assert len(session.calls) == 1
    assert recorder.errors == ["connection refused"]
    assert recorder.progress == []


def test_upload_rejects_empty_file_without_requests():
    session = RecordingSession([])
    recorder = Recorder()

    ChunkedUploader(session, ENDPOINT).upload(
        io.BytesIO(b""), "a.csv", 0, "ws-1", **recorder.callbacks()
    )

    assert session.calls == []
    assert recorder.errors == ["File is empty"]


def test_upload_without_callbacks_returns_payload():
    session = RecordingSession([_ok()])

    result = ChunkedUploader(session, ENDPOINT).upload(io.BytesIO(b"abc"), "a.csv", 3, "ws-1")

    assert result["data"]["id"] == "layer-1"


def test_for_base_url_targets_layer_upload_route():
    uploader = ChunkedUploader.for_base_url(RecordingSession([]), "http://web.test/")

    assert uploader.endpoint == ENDPOINT
