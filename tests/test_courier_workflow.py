"""
Flujo de entregas del corredor contra el marketplace falso.
"""

import httpx
import pytest

from marketplace_panel.core.errors import ApiError, ErrorKind
from marketplace_panel.modules.courier import CourierDeliveryService, CourierRepository
from marketplace_panel.modules.courier.schemas import DeliveryFilter, DeliveryStatus

from fake_marketplace import make_order


@pytest.mark.asyncio
async def test_fetch_orders_loads_page_and_total(dashboard, marketplace):
    marketplace.add_orders(*[make_order(f"o-{i}") for i in range(23)])
    deliveries = dashboard.deliveries(limit=10)

    orders = await deliveries.fetch_orders()

    assert len(orders) == 10
    assert deliveries.pagination.total == 23
    assert deliveries.pagination.pages == 3
    assert orders[0].item.product_key == "prod-o-0"


@pytest.mark.asyncio
async def test_requesting_page_past_the_end_is_a_noop(dashboard, marketplace):
    marketplace.add_orders(*[make_order(f"o-{i}") for i in range(23)])
    deliveries = dashboard.deliveries(limit=10)
    await deliveries.fetch_orders()
    requests_before = len(marketplace.requests)

    assert await deliveries.change_page(4) is False
    assert len(marketplace.requests) == requests_before

    assert await deliveries.change_page(3) is True
    assert len(deliveries.orders) == 3


@pytest.mark.asyncio
async def test_delivered_round_trip_appends_exactly_one_history_entry(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Out for Delivery"))
    deliveries = dashboard.deliveries()
    await deliveries.fetch_orders()
    before = len(deliveries.find_order("o-1").item.status_history)

    updated = await deliveries.update_status("o-1", "prod-o-1", DeliveryStatus.DELIVERED)

    assert updated.item.courier_status == "Delivered"
    assert len(updated.item.status_history) == before + 1
    last = updated.item.status_history[-1]
    assert last.status == "Delivered"
    assert last.updated_by.role == "courier"
    assert last.updated_by.user_id == "courier-1"
    assert updated.item.history_is_monotonic()

    refetched = await deliveries.get_order("o-1")
    assert refetched.item.courier_status == "Delivered"
    assert len(refetched.item.status_history) == before + 1
    assert not deliveries.can_update(refetched)


@pytest.mark.asyncio
async def test_local_list_reflects_server_after_mutation(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Pending"))
    deliveries = dashboard.deliveries()
    await deliveries.fetch_orders()

    await deliveries.update_status("o-1", "prod-o-1", "Picked Up")

    assert deliveries.find_order("o-1").item.courier_status == "Picked Up"
    assert "GET /api/courier/orders/o-1" in marketplace.requests


@pytest.mark.asyncio
async def test_terminal_order_rejects_further_transitions_locally(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Delivered"))
    deliveries = dashboard.deliveries()
    await deliveries.fetch_orders()
    requests_before = len(marketplace.requests)

    with pytest.raises(ApiError) as exc:
        await deliveries.update_status("o-1", "prod-o-1", "Failed Delivery")

    assert exc.value.kind == ErrorKind.VALIDATION_FAILURE
    assert len(marketplace.requests) == requests_before


@pytest.mark.asyncio
async def test_server_rejects_illegal_transition_when_status_unknown_locally(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Pending"))
    deliveries = dashboard.deliveries()

    with pytest.raises(ApiError) as exc:
        await deliveries.update_status("o-1", "prod-o-1", "Delivered")

    assert exc.value.code == 400
    assert exc.value.is_big_error is False
    assert "Invalid status transition" in exc.value.message
    assert marketplace.orders["o-1"]["item"]["courierStatus"] == "Pending"
    assert len(marketplace.orders["o-1"]["item"]["statusHistory"]) == 1


@pytest.mark.asyncio
async def test_report_issue_while_out_for_delivery(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Out for Delivery"), make_order("o-2", "In Transit"))
    deliveries = dashboard.deliveries()
    await deliveries.fetch_orders()
    before = len(deliveries.find_order("o-1").item.status_history)

    order = await deliveries.report_issue("o-1", "prod-o-1", "Buyer not at address")

    assert deliveries.is_issue_reported(order)
    assert len(order.item.status_history) == before + 1
    assert order.item.status_history[-1].reason == "Buyer not at address"

    reported = await deliveries.set_status_filter(DeliveryFilter.ISSUE_REPORTED)
    assert [o.id for o in reported] == ["o-1"]
    assert deliveries.pagination.page == 1


@pytest.mark.asyncio
async def test_report_issue_while_pending_is_blocked_on_the_client(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Pending"))
    deliveries = dashboard.deliveries()
    await deliveries.fetch_orders()

    with pytest.raises(ApiError) as exc:
        await deliveries.report_issue("o-1", "prod-o-1", "Package damaged")

    assert exc.value.is_big_error is False
    assert "POST /api/courier/orders/o-1/report-issue" not in marketplace.requests
    assert not deliveries.can_report_issue(deliveries.find_order("o-1"))


@pytest.mark.asyncio
async def test_report_issue_while_pending_is_rejected_by_the_server(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Pending"))

    with pytest.raises(ApiError) as exc:
        await dashboard.courier.report_delivery_issue("o-1", "prod-o-1", "Package damaged")

    assert exc.value.code == 400
    assert exc.value.is_big_error is False
    assert marketplace.orders["o-1"]["item"]["issueReported"] is False


@pytest.mark.asyncio
async def test_blank_reason_never_reaches_the_server(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Out for Delivery"))
    deliveries = dashboard.deliveries()
    await deliveries.fetch_orders()

    with pytest.raises(ApiError):
        await deliveries.report_issue("o-1", "prod-o-1", "   ")

    assert not any("report-issue" in r for r in marketplace.requests)


@pytest.mark.asyncio
async def test_unknown_order_surfaces_not_found(dashboard):
    deliveries = dashboard.deliveries()

    with pytest.raises(ApiError) as exc:
        await deliveries.get_order("missing")

    assert exc.value.code == 404
    assert exc.value.message == "Order not found"


@pytest.mark.asyncio
async def test_summary_counts_loaded_page(dashboard, marketplace):
    marketplace.add_orders(make_order("o-1", "Pending"), make_order("o-2", "Delivered"), make_order("o-3", "Delivered"))
    deliveries = dashboard.deliveries()
    await deliveries.fetch_orders()

    summary = deliveries.summary()

    assert summary["total"] == 3
    assert summary["by_status"]["Delivered"] == 2
    assert summary["by_status"]["Pending"] == 1
    assert summary["issues_reported"] == 0


def order_row(order_id, product_id, status):
    row = make_order(order_id, status)
    row["item"]["productId"]["_id"] = product_id
    return row


@pytest.mark.asyncio
async def test_transition_check_uses_the_item_being_updated(make_client):
    rows = [order_row("o-1", "prod-A", "Delivered"), order_row("o-1", "prod-B", "Pending")]

    def respond(request, attempt):
        if request.method == "PATCH":
            rows[1] = order_row("o-1", "prod-B", "Picked Up")
            return httpx.Response(200, json={"success": True})
        if request.url.path == "/api/courier/orders/o-1":
            return httpx.Response(200, json={"success": True, "data": rows[1]})
        return httpx.Response(200, json={"success": True, "data": rows, "pagination": {"total": 2}})

    client, handler = make_client(respond)
    deliveries = CourierDeliveryService(CourierRepository(client))
    await deliveries.fetch_orders()

    updated = await deliveries.update_status("o-1", "prod-B", "Picked Up")

    assert updated.item.courier_status == "Picked Up"
    assert [r.method for r in handler.requests].count("PATCH") == 1
    assert deliveries.find_order("o-1", "prod-A").item.courier_status == "Delivered"
    assert deliveries.find_order("o-1", "prod-B").item.courier_status == "Picked Up"

    with pytest.raises(ApiError) as exc:
        await deliveries.update_status("o-1", "prod-A", "Failed Delivery")

    assert exc.value.kind == ErrorKind.VALIDATION_FAILURE
    assert [r.method for r in handler.requests].count("PATCH") == 1


@pytest.mark.asyncio
async def test_malformed_order_rows_surface_as_normalized_error(make_client):
    def respond(request, attempt):
        if request.url.path == "/api/courier/orders/o-2":
            return httpx.Response(200, json={"success": True, "data": {"_id": "o-2", "item": "broken"}})
        return httpx.Response(200, json={"success": True, "data": [{"_id": "o-1"}], "pagination": {"total": 1}})

    client, handler = make_client(respond)
    deliveries = CourierDeliveryService(CourierRepository(client))

    with pytest.raises(ApiError) as listing:
        await deliveries.fetch_orders()

    with pytest.raises(ApiError) as detail:
        await deliveries.get_order("o-2")

    for exc in (listing, detail):
        assert exc.value.code == 500
        assert exc.value.kind == ErrorKind.UNKNOWN
        assert exc.value.message == "Invalid order data received."
    assert deliveries.orders == []
