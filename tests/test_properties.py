import pytest

from realestate.errors import (
    FileIOFailure, InvalidFields, InvalidUpload, NotFound, StorageFailure,
)
from realestate.extensions import db
from realestate.services.properties import PropertyService, property_service
from realestate.services.property_store import PropertyStore


def test_create_list_delete_scenario(app, files, listing, image_bytes):
    with app.app_context():
        service = property_service()
        prop = service.create_listing(image_bytes, 'house.png', listing)

        listed = service.list_listings()
        assert len(listed) == 1
        item = listed[0].to_dict()
        assert item['title'] == 'A'
        assert item['rate'] == 100
        assert item['sqft'] == 500
        assert item['beds'] == 2
        assert item['baths'] == 1
        assert item['rating'] == 4
        assert item['booking'] == 'available'
        assert item['status'] == 'available'
        assert files.exists(item['image_path'])

        service.delete_listing(prop.id)
        assert service.list_listings() == []
        assert not files.exists(item['image_path'])


def test_create_requires_file(app, listing):
    with app.app_context():
        with pytest.raises(InvalidUpload):
            property_service().create_listing(b'', 'house.png', listing)


def test_oversized_upload_leaves_stores_unchanged(app, files, listing, big_image_bytes):
    with app.app_context():
        service = property_service()
        with pytest.raises(InvalidUpload) as exc:
            service.create_listing(big_image_bytes, 'big.png', listing)
        assert exc.value.status_code == 400
        assert service.list_listings() == []
    assert files.keys() == []


def test_bad_fields_rejected_before_file_is_written(app, files, listing, image_bytes):
    listing['rating'] = '9'
    del listing['title']
    with app.app_context():
        with pytest.raises(InvalidFields):
            property_service().create_listing(image_bytes, 'house.png', listing)
    assert files.keys() == []


def test_booking_must_be_known_state(app, files, listing, image_bytes):
    listing['booking'] = 'maybe'
    with app.app_context():
        with pytest.raises(InvalidFields):
            property_service().create_listing(image_bytes, 'house.png', listing)


def test_failed_record_save_removes_uploaded_file(app, files, listing, image_bytes):
    class BrokenStore:
        def create(self, fields):
            raise StorageFailure()

    with app.app_context():
        service = PropertyService(BrokenStore(), files)
        with pytest.raises(StorageFailure):
            service.create_listing(image_bytes, 'house.png', listing)
    assert files.keys() == []


def test_update_changes_only_given_fields(app, listing, image_bytes):
    with app.app_context():
        service = property_service()
        prop = service.create_listing(image_bytes, 'house.png', listing)
        before = prop.to_dict()

        updated = service.update_listing(prop.id, {'rate': 250, 'image_path': 'other.png', 'id': 99})
        assert updated.rate == 250

        after = service.get_listing(prop.id).to_dict()
        assert after['rate'] == 250
        for key in ('id', 'title', 'description', 'image_path', 'sqft', 'beds', 'baths', 'rating', 'booking'):
            assert after[key] == before[key]


def test_update_invalid_value_keeps_record(app, listing, image_bytes):
    with app.app_context():
        service = property_service()
        prop_id = service.create_listing(image_bytes, 'house.png', listing).id
        with pytest.raises(InvalidFields):
            service.update_listing(prop_id, {'title': 'B', 'beds': -1})
        prop = service.get_listing(prop_id)
        assert prop.title == 'A'
        assert prop.beds == 2


def test_update_missing(app):
    with app.app_context():
        with pytest.raises(NotFound):
            property_service().update_listing(12345, {'title': 'B'})


def test_delete_when_file_already_gone(app, files, listing, image_bytes):
    with app.app_context():
        service = property_service()
        prop = service.create_listing(image_bytes, 'house.png', listing)
        files.delete(prop.image_path)

        service.delete_listing(prop.id)
        assert service.list_listings() == []


def test_delete_missing_does_not_touch_files(app, monkeypatch):
    calls = []
    files = app.extensions['file_store']
    monkeypatch.setattr(files, 'delete', lambda key: calls.append(key))
    monkeypatch.setattr(files, 'save', lambda *a, **kw: calls.append(a))

    with app.app_context():
        with pytest.raises(NotFound):
            property_service().delete_listing(12345)
    assert calls == []


def test_file_delete_failure_keeps_record(app, files, listing, image_bytes, monkeypatch):
    with app.app_context():
        service = property_service()
        prop_id = service.create_listing(image_bytes, 'house.png', listing).id

        def broken_delete(key):
            raise FileIOFailure('permission denied')
        monkeypatch.setattr(files, 'delete', broken_delete)

        with pytest.raises(StorageFailure):
            service.delete_listing(prop_id)
        assert service.get_listing(prop_id) is not None


def test_store_delete_twice_reports_not_found(app, listing, image_bytes):
    with app.app_context():
        prop_id = property_service().create_listing(image_bytes, 'house.png', listing).id
        store = PropertyStore(db.session)
        store.delete(prop_id)
        with pytest.raises(NotFound):
            store.delete(prop_id)
        assert store.get(prop_id) is None


@pytest.mark.parametrize('field,value', [
    ('rate', float('nan')), ('rate', float('inf')), ('baths', float('inf')),
    ('rating', float('nan')), ('beds', 2.7), ('sqft', True),
])
def test_model_rejects_bad_numbers(app, field, value):
    from realestate.models import Property
    with app.app_context():
        with pytest.raises(ValueError):
            setattr(Property(), field, value)
