"""
Tests for image materialization.
"""

import base64

import pytest

from conftest import make_image
from photosidebar.core.errors import CopyError, MaterializeError, ReadError
from photosidebar.services.materializer import MaterializeService, MaterializeWorker, load


def test_load_encodes_bytes_with_content_type(pics_dir):
    path = pics_dir / "b.png"
    image = load(str(path))

    assert image.content_type == "image/png"
    assert image.to_bytes() == path.read_bytes()
    assert image.data_uri.startswith("data:image/png;base64,")
    assert base64.b64decode(image.data_uri.split(",", 1)[1]) == path.read_bytes()


def test_load_missing_file_raises_read_error(temp_dir):
    with pytest.raises(ReadError) as excinfo:
        load(str(temp_dir / "gone.png"))
    assert isinstance(excinfo.value, MaterializeError)
    assert isinstance(excinfo.value, CopyError)


def test_load_directory_raises_read_error(pics_dir):
    with pytest.raises(ReadError):
        load(str(pics_dir / "sub"))


def test_load_rejects_oversized_file(pics_dir):
    with pytest.raises(ReadError, match="too large"):
        load(str(pics_dir / "b.png"), max_size=10)


@pytest.fixture
def service(qapp):
    service = MaterializeService()
    yield service
    service.stop_service()


def test_service_delivers_results_with_ticket(service, pics_dir, temp_dir, wait_for):
    received = {}
    service.imageMaterialized.connect(
        lambda ticket, path, result: received.__setitem__(path, (ticket, result))
    )
    ticket = service.next_ticket()
    good = str(pics_dir / "A.JPG")
    missing = str(temp_dir / "missing.png")

    service.request(ticket, good)
    service.request(ticket, missing)

    assert wait_for(lambda: len(received) == 2)
    good_ticket, good_result = received[good]
    assert good_ticket == ticket
    assert good_result.success
    assert good_result.data.content_type == "image/jpeg"

    _, missing_result = received[missing]
    assert not missing_result.success
    assert missing_result.error_message


def test_tickets_increase(service):
    first = service.next_ticket()
    assert service.next_ticket() > first


def test_retired_ticket_is_no_longer_live(service):
    ticket = service.next_ticket()
    assert service.is_live(ticket)

    service.retire(ticket)

    assert not service.is_live(ticket)
    assert service.is_live(service.next_ticket())


def test_worker_skips_retired_work_and_serves_priority_first(qapp, pics_dir):
    live = {2}
    worker = MaterializeWorker(10 * 1024 * 1024, live.__contains__)
    emitted = []
    worker.imageMaterialized.connect(lambda ticket, path, result: emitted.append((ticket, path)))
    stale = str(pics_dir / "b.png")
    viewer = str(pics_dir / "A.JPG")
    thumb = str(pics_dir / "sub" / "c.gif")

    for _ in range(50):
        worker.enqueue(1, stale)
    worker.enqueue(2, thumb)
    worker.enqueue(2, viewer, priority=True)
    for _ in range(52):
        worker.process_next()

    assert emitted == [(2, viewer), (2, thumb)]
