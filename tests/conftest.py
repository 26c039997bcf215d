import io
import random

import pytest
from PIL import Image

from realestate import create_app
from realestate.config import TestConfig


def make_image(size=(128, 128), fmt='PNG', seed=0):
    """Noise image; random pixels keep PNG from compressing it much."""
    rng = random.Random(seed)
    img = Image.frombytes('RGB', size, rng.randbytes(size[0] * size[1] * 3))
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


LISTING = {
    'title': 'A',
    'description': 'Two bedroom flat near the park',
    'rate': '100',
    'sqft': '500',
    'beds': '2',
    'baths': '1',
    'rating': '4',
    'booking': 'available',
}


@pytest.fixture()
def app(tmp_path):
    class Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    return create_app(Config)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(app):
    c = app.test_client()
    r = c.post('/admin/login', data={'username': 'admin', 'password': 'letmein'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin')
    return c


@pytest.fixture()
def files(app):
    return app.extensions['file_store']


@pytest.fixture()
def image_bytes():
    data = make_image()
    assert 40000 < len(data) < 80000
    return data


@pytest.fixture()
def big_image_bytes():
    data = make_image(size=(200, 200), seed=1)
    assert len(data) > 80000
    return data


@pytest.fixture()
def small_image_bytes():
    return make_image(size=(16, 16))


@pytest.fixture()
def listing():
    return dict(LISTING)
