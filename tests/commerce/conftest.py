import pytest


@pytest.fixture(scope="session")
def _commerce_domain(request):
    """Initialize the commerce domain once per session."""
    from commerce.domain import commerce

    commerce.init()
    return commerce


@pytest.fixture(scope="session", autouse=True)
def setup_db(_commerce_domain):
    from commerce.utils.db import drop_db, setup_db

    setup_db(_commerce_domain)

    yield

    drop_db(_commerce_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_commerce_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _commerce_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture(autouse=True)
def _reset_ports():
    """Every test starts with the default adapters."""
    yield

    from commerce.cart.store import reset_cart_store
    from commerce.catalog import reset_catalog
    from commerce.notification import reset_event_sink
    from commerce.order.sink import reset_order_sink
    from commerce.pricing import reset_price_source, reset_strategy

    reset_cart_store()
    reset_catalog()
    reset_event_sink()
    reset_order_sink()
    reset_price_source()
    reset_strategy()


@pytest.fixture()
def catalog():
    from commerce.catalog import set_catalog
    from commerce.catalog.fake_adapter import FakeProductCatalog

    fake = FakeProductCatalog()
    fake.add("TSHIRT-001", "Logo T-Shirt")
    fake.add("MUG-002", "Coffee Mug")
    fake.add("POSTER-003", "Poster")
    set_catalog(fake)
    return fake


@pytest.fixture()
def price_source():
    from commerce.pricing import set_price_source
    from commerce.pricing.fake_adapter import FakePriceSource

    fake = FakePriceSource()
    fake.set_prices("TSHIRT-001", (5.00, "USD"))
    fake.set_prices("MUG-002", (3.00, "USD"))
    set_price_source(fake)
    return fake


@pytest.fixture()
def event_sink():
    from commerce.notification import set_event_sink
    from commerce.notification.adapters import RecordingEventSink

    sink = RecordingEventSink()
    set_event_sink(sink)
    return sink


@pytest.fixture()
def order_sink():
    from commerce.order.fake_sink import FakeOrderSink
    from commerce.order.sink import set_order_sink

    sink = FakeOrderSink()
    set_order_sink(sink)
    return sink
