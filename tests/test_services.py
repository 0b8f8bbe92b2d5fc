"""
Test suite for the resource services
"""

import base64
import json
import pytest
from unittest.mock import Mock
from urllib.parse import parse_qsl, urlsplit

import requests
from requests.structures import CaseInsensitiveDict

from woocommerce_client.errors import PaginationUnavailableError, ResponseDecodingError
from woocommerce_client.http_client import App, Client
from woocommerce_client.models import (
    BatchOption,
    Coupon,
    Customer,
    File,
    Order,
    Product,
    Subscription,
    SubscriptionNote,
)
from woocommerce_client.query import DeleteOption, OrderListOptions

SHOP_URL = "https://shop.example.com"


def build_response(status_code, body=b"", headers=None):
    """Build a requests.Response with a buffered body"""
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.headers = CaseInsensitiveDict(headers or {})
    return response


def build_client(*responses):
    session = Mock()
    session.send.side_effect = list(responses)
    client = Client(App(consumer_key="ck", consumer_secret="cs"), SHOP_URL, version="v3", session=session)
    return client, session


def sent_request(session, index=-1):
    return session.send.call_args_list[index][0][0]


class TestResourceService:
    """Test suite for top-level resource operations"""

    def test_get_order_requests_order_path(self):
        # Arrange
        client, session = build_client(build_response(200, b'{"id": 12, "total": "99.90"}'))

        # Act
        order = client.order.get(12)

        # Assert
        request = sent_request(session)
        assert request.method == "GET"
        assert urlsplit(request.url).path == "/wp-json/wc/v3/orders/12"
        assert isinstance(order, Order)
        assert order.total.encode() == 99.9

    def test_get_product_with_price_beyond_float32_range_raises_decoding_error(self):
        # Arrange
        client, _ = build_client(build_response(200, b'{"id": 1, "price": "1e39"}'))

        # Act & Assert
        with pytest.raises(ResponseDecodingError):
            client.product.get(1)

    def test_create_coupon_posts_coupon_body(self):
        # Arrange
        client, session = build_client(build_response(201, b'{"id": 1, "code": "WELCOME10"}'))

        # Act
        coupon = client.coupon.create(Coupon(code="WELCOME10", amount="10"))

        # Assert
        request = sent_request(session)
        assert request.method == "POST"
        assert urlsplit(request.url).path == "/wp-json/wc/v3/coupons"
        assert json.loads(request.body) == {"code": "WELCOME10", "amount": "10"}
        assert coupon.id == 1

    def test_update_customer_puts_to_entity_id(self):
        # Arrange
        client, session = build_client(build_response(200, b'{"id": 33, "first_name": "Ana"}'))

        # Act
        customer = client.customer.update(Customer(id=33, first_name="Ana"))

        # Assert
        request = sent_request(session)
        assert request.method == "PUT"
        assert urlsplit(request.url).path == "/wp-json/wc/v3/customers/33"
        assert customer.first_name == "Ana"

    def test_delete_product_with_force_sends_force_query(self):
        # Arrange
        client, session = build_client(build_response(200, b'{"id": 8, "name": "Mug"}'))

        # Act
        product = client.product.delete(8, DeleteOption(force=True))

        # Assert
        request = sent_request(session)
        assert request.method == "DELETE"
        assert urlsplit(request.url).path == "/wp-json/wc/v3/products/8"
        assert parse_qsl(urlsplit(request.url).query) == [("force", "true")]
        assert product.name == "Mug"

    def test_list_orders_with_options_returns_orders(self):
        # Arrange
        client, session = build_client(build_response(200, b'[{"id": 1}, {"id": 2}]'))

        # Act
        orders = client.order.list(OrderListOptions(status=["completed"], per_page=2))

        # Assert
        query = parse_qsl(urlsplit(sent_request(session).url).query)
        assert query == [("per_page", "2"), ("status", "completed")]
        assert [order.id for order in orders] == [1, 2]

    def test_list_with_pagination_returns_items_and_cursors(self):
        # Arrange
        headers = {
            "X-WP-Total": "42",
            "X-WP-TotalPages": "3",
            "Link": f'<{SHOP_URL}/wp-json/wc/v3/products?page=2>; rel="next"',
        }
        client, _ = build_client(build_response(200, b'[{"id": 5, "price": "12.5"}]', headers))

        # Act
        products, pagination = client.product.list_with_pagination()

        # Assert
        assert products[0].id == 5
        assert pagination.total == 42
        assert pagination.total_pages == 3
        assert pagination.next_page_options.page == 2

    def test_list_with_pagination_with_malformed_link_returns_none_pagination(self):
        # Arrange
        client, _ = build_client(build_response(200, b'[]', {"Link": "garbage"}))

        # Act
        customers, pagination = client.customer.list_with_pagination()

        # Assert
        assert customers == []
        assert pagination is None

    def test_list_with_pagination_in_strict_mode_raises_for_malformed_link(self):
        # Arrange
        client, _ = build_client(build_response(200, b'[]', {"Link": "garbage"}))

        # Act & Assert
        with pytest.raises(PaginationUnavailableError):
            client.customer.list_with_pagination(strict=True)

    def test_batch_products_posts_to_batch_path_and_decodes_resources(self):
        """
        Test that the batch body and response use the product schema
        """
        # Arrange
        body = b'{"create": [{"id": 10, "name": "Cup"}], "update": [], "delete": [{"id": 4}]}'
        client, session = build_client(build_response(200, body))
        option = BatchOption[Product](create=[Product(name="Cup")], delete=[4])

        # Act
        result = client.product.batch(option)

        # Assert
        request = sent_request(session)
        assert urlsplit(request.url).path == "/wp-json/wc/v3/products/batch"
        assert json.loads(request.body) == {"create": [{"name": "Cup"}], "delete": [4]}
        assert result.create[0].name == "Cup"
        assert result.delete[0].id == 4


class TestSubscriptionChildServices:
    """Test suite for services nested under a subscription"""

    def test_get_subscription_uses_subscriptions_path(self):
        # Arrange
        client, session = build_client(build_response(200, b'{"id": 77, "billing_interval": "1"}'))

        # Act
        subscription = client.subscription.get(77)

        # Assert
        assert urlsplit(sent_request(session).url).path == "/wp-json/wc/v3/subscriptions/77"
        assert isinstance(subscription, Subscription)
        assert subscription.billing_interval == 1

    def test_create_subscription_note_posts_under_subscription(self):
        # Arrange
        client, session = build_client(build_response(201, b'{"id": 3, "note": "Renewed"}'))

        # Act
        note = client.subscription_note.create(77, SubscriptionNote(note="Renewed"))

        # Assert
        assert urlsplit(sent_request(session).url).path == "/wp-json/wc/v3/subscriptions/77/notes"
        assert note.note == "Renewed"

    def test_delete_subscription_note_targets_note_id(self):
        # Arrange
        client, session = build_client(build_response(200, b'{"id": 3}'))

        # Act
        client.subscription_note.delete(77, 3, DeleteOption(force=True))

        # Assert
        request = sent_request(session)
        assert request.method == "DELETE"
        assert urlsplit(request.url).path == "/wp-json/wc/v3/subscriptions/77/notes/3"

    def test_list_subscription_orders_returns_orders(self):
        # Arrange
        client, session = build_client(build_response(200, b'[{"id": 501, "renewal": "1"}]'))

        # Act
        orders = client.subscription_order.list(77)

        # Assert
        assert urlsplit(sent_request(session).url).path == "/wp-json/wc/v3/subscriptions/77/orders"
        assert isinstance(orders[0], Order)
        assert orders[0].renewal == 1

    def test_batch_subscription_orders_posts_to_nested_batch_path(self):
        # Arrange
        client, session = build_client(build_response(200, b'{"update": [{"id": 501, "status": "completed"}]}'))

        # Act
        result = client.subscription_order.batch(
            77, BatchOption[Order](update=[Order(id=501, status="completed")])
        )

        # Assert
        assert urlsplit(sent_request(session).url).path == "/wp-json/wc/v3/subscriptions/77/orders/batch"
        assert result.update[0].status == "completed"


class TestFileService:
    """Test suite for file downloads"""

    def test_get_file_decodes_base64_content(self, caplog):
        # Arrange
        content = base64.b64encode(b"%PDF-1.4").decode()
        body = json.dumps({"filename": "invoice.pdf", "content": content}).encode()
        client, session = build_client(build_response(200, body))

        # Act
        with caplog.at_level("INFO"):
            downloaded = client.file.get("invoice.pdf")

        # Assert
        assert urlsplit(sent_request(session).url).path == "/wp-json/wc/v3/download/invoice.pdf"
        assert isinstance(downloaded, File)
        assert downloaded.name == "invoice.pdf"
        assert downloaded.content == b"%PDF-1.4"
        assert "file=invoice.pdf" in caplog.text
