"""
Pytest fixtures for StockWise tests.
"""

import pytest
from django.contrib.auth import get_user_model

from stockwise.adapters.memory import InMemoryIdentityBackend
from stockwise.models import ALL_PERMISSIONS, Product, Role, UserProfile
from stockwise.services.access import AccessService


User = get_user_model()


@pytest.fixture
def projector(db):
    """Product with 5 units, reorder point 2."""
    return Product.objects.create(
        id='PRJ-01',
        name='Proyector Epson',
        category='Audiovisual',
        location='Almacén A',
        quantity=5,
        reorder_point=2,
    )


@pytest.fixture
def laptop(db):
    """Product with 10 units, reorder point 3."""
    return Product.objects.create(
        id='LAP-01',
        name='Portátil Lenovo',
        category='Informática',
        location='Almacén A',
        quantity=10,
        reorder_point=3,
    )


@pytest.fixture
def identity():
    """Fresh in-memory identity backend."""
    return InMemoryIdentityBackend()


@pytest.fixture
def access(db, identity):
    return AccessService(identity)


@pytest.fixture
def staff_user(db):
    """Auth user whose profile may use every screen."""
    user = User.objects.create_user(username='gestor', password='gestor123')
    UserProfile.objects.create(
        uid=str(user.pk),
        name='Gestor',
        username='gestor',
        role=Role.ADMIN,
        permissions=list(ALL_PERMISSIONS),
    )
    return user


@pytest.fixture
def loans_only_user(db):
    """Auth user limited to the loans screen."""
    user = User.objects.create_user(username='prestamos', password='prestamos1')
    UserProfile.objects.create(
        uid=str(user.pk),
        name='Préstamos',
        username='prestamos',
        role=Role.USER,
        permissions=['loans'],
    )
    return user


@pytest.fixture
def api(client, staff_user):
    """Django test client logged in as staff_user."""
    client.force_login(staff_user)
    return client
