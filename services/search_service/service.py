import structlog

from shared.config import settings
from shared.observability import titleflow_search_total
from shared.provider import ProviderClient, ProviderError, ProviderUnavailable
from .address_parser import parse_address, to_provider_request, normalize_address, DEFAULT_STATE
from .mapping import map_search_payload, map_status_payload, random_id
from .mock_data import MOCK_ADDRESSES, MOCK_COMPLETED_SEARCH
from .schemas import AddressResult, SearchResponse, SearchStatusResponse

logger = structlog.get_logger(__name__)


class PropertySearchService:

    @staticmethod
    async def search(provider: ProviderClient, query: str) -> SearchResponse:
        query = (query or "").strip()
        if not query:
            return SearchResponse(query=query)

        if settings.USE_MOCK_API:
            results = PropertySearchService.search_mock(query)
            titleflow_search_total.labels(mode="mock", outcome="results").inc()
            return SearchResponse(query=query, results=results)

        return await PropertySearchService.search_live(provider, query)

    @staticmethod
    async def search_live(provider: ProviderClient, query: str) -> SearchResponse:
        state, body = to_provider_request(parse_address(query))
        logger.info("search_live", query=query, state=state, body=body)

        try:
            data = await provider.search_address(state, body)
        except (ProviderError, ProviderUnavailable) as e:
            # The live path never falls back to mock data: "no results" instead
            logger.warning("search_failed", query=query, error=str(e))
            titleflow_search_total.labels(mode="live", outcome="error").inc()
            return SearchResponse(query=query)

        results, pending_order_id = map_search_payload(data, query)
        if pending_order_id:
            logger.warning("search_pending", order_id=pending_order_id)
            outcome = "pending"
        else:
            outcome = "results" if results else "empty"
        titleflow_search_total.labels(mode="live", outcome=outcome).inc()
        return SearchResponse(query=query, results=results, pending_order_id=pending_order_id)

    @staticmethod
    def search_mock(query: str) -> list:
        needle = normalize_address(query)

        matches = []
        for mock in MOCK_ADDRESSES:
            haystacks = (mock["full_address"], mock["title_reference"] or "", mock["lot_plan"] or "")
            if any(needle in normalize_address(h) for h in haystacks if h):
                matches.append(AddressResult(**mock))
        if matches:
            return matches

        # Unknown address: synthesise a plausible property from the query itself
        parsed = parse_address(query)
        return [AddressResult(
            id=f"sim_{random_id()[:5]}",
            full_address=query.upper(),
            street=parsed.street,
            suburb=parsed.suburb or "UNKNOWN",
            state=parsed.state or DEFAULT_STATE,
            postcode=parsed.postcode or "2000",
            lot_plan="1//DP999999",
            title_reference="1/DP999999",
        )]

    @staticmethod
    async def poll_status(provider: ProviderClient, order_id: str) -> SearchStatusResponse:
        """Checks a pending address-search order. Read-only: orders are never touched."""
        if settings.USE_MOCK_API:
            return SearchStatusResponse(
                order_id=order_id,
                status="complete",
                results=[AddressResult(**MOCK_COMPLETED_SEARCH)],
            )

        logger.info("search_status_poll", order_id=order_id)
        data = await provider.get_search_status(order_id)
        return map_status_payload(order_id, data)
