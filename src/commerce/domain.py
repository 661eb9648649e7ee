"""Commerce bounded context: shopping cart pricing and checkout.

Carts are plain CQRS aggregates stored as whole documents. Prices are
resolved through a pluggable price source and selection strategy, and a
checkout freezes the resolved prices into an Order snapshot.
"""

from protean.domain import Domain

from commerce.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="storefront")

logger = get_logger(__name__)

commerce = Domain(name="commerce")
