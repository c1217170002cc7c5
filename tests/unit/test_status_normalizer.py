"""
Unit tests for the execution status normalizer.

Every payload, however sparse or malformed, must come back fully shaped.
"""

from datetime import datetime, timedelta, timezone

import pytest

from paylink.core.swap_status import normalize_execution_status
from paylink.core.swap_status.normalizer import STATUS_SOURCES, first_present

NULLABLE = [
    "amount_in",
    "amount_in_formatted",
    "amount_in_usd",
    "amount_out",
    "amount_out_formatted",
    "amount_out_usd",
    "deposited_amount",
    "deposited_amount_formatted",
    "deposited_amount_usd",
    "slippage",
]
REFUNDS = ["refunded_amount", "refunded_amount_formatted", "refunded_amount_usd"]
HASHES = ["destination_chain_tx_hashes", "intent_hashes", "near_tx_hashes", "origin_chain_tx_hashes"]


def _parse(ts: str) -> datetime:
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


def _assert_defaults(details, skip=()):
    for name in NULLABLE:
        if name not in skip:
            assert getattr(details, name) is None, name
    for name in REFUNDS:
        if name not in skip:
            assert getattr(details, name) == "0", name
    for name in HASHES:
        if name not in skip:
            assert getattr(details, name) == [], name


class TestEmptyPayload:

    def test_empty_mapping(self):
        before = datetime.now(timezone.utc)
        result = normalize_execution_status({})

        assert result.status == "UNKNOWN"
        assert result.origin_asset is None
        assert result.destination_asset is None
        _assert_defaults(result.swap_details)
        assert abs(_parse(result.updated_at) - before) < timedelta(seconds=5)

    @pytest.mark.parametrize("payload", [None, [], "PENDING", 42, ["status", "SUCCESS"]])
    def test_non_mapping_payload(self, payload):
        result = normalize_execution_status(payload)

        assert result.status == "UNKNOWN"
        _assert_defaults(result.swap_details)

    def test_injected_clock(self):
        now = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)

        result = normalize_execution_status({}, now=now)

        assert result.updated_at == "2025-01-02T03:04:05.678Z"


class TestStatusFallbacks:

    def test_status_and_details(self):
        result = normalize_execution_status({
            "status": "PENDING_DEPOSIT",
            "swapDetails": {"amountIn": "100", "destinationChainTxHashes": ["0xabc"]},
        })

        assert result.status == "PENDING_DEPOSIT"
        assert result.swap_details.amount_in == "100"
        assert result.swap_details.destination_chain_tx_hashes == ["0xabc"]
        _assert_defaults(result.swap_details, skip={"amount_in", "destination_chain_tx_hashes"})

    def test_execution_status_fallback(self):
        assert normalize_execution_status({"executionStatus": "SUCCESS"}).status == "SUCCESS"

    def test_null_status_skipped(self):
        assert normalize_execution_status({"state": "FAILED", "status": None}).status == "FAILED"

    def test_empty_string_status_skipped(self):
        result = normalize_execution_status({"status": "", "executionStatus": "PROCESSING", "state": "FAILED"})

        assert result.status == "PROCESSING"

    def test_priority_order(self):
        result = normalize_execution_status({"state": "C", "executionStatus": "B", "status": "A"})

        assert result.status == "A"

    def test_status_coerced_to_string(self):
        assert normalize_execution_status({"status": 3}).status == "3"

    def test_false_status_skipped(self):
        result = normalize_execution_status({"status": False, "executionStatus": "SUCCESS"})

        assert result.status == "SUCCESS"

    def test_zero_status_skipped(self):
        result = normalize_execution_status({"status": 0, "state": "FAILED"})

        assert result.status == "FAILED"

    @pytest.mark.parametrize("value", [False, 0, 0.0, "  ", [], {}])
    def test_falsy_status_only_yields_unknown(self, value):
        assert normalize_execution_status({"status": value}).status == "UNKNOWN"

    def test_zero_updated_at_skipped(self):
        result = normalize_execution_status({
            "updatedAt": 0,
            "swapDetails": {"updatedAt": "2024-01-01T00:00:00.000Z"},
        })

        assert result.updated_at == "2024-01-01T00:00:00.000Z"

    def test_sources_are_ordered(self):
        raw = {"executionStatus": "B", "state": "C"}

        assert first_present(STATUS_SOURCES, raw, {}) == "B"
        assert first_present(STATUS_SOURCES[2:], raw, {}) == "C"


class TestUpdatedAt:

    def test_root_wins(self):
        result = normalize_execution_status({
            "updatedAt": "2025-06-01T00:00:00.000Z",
            "swapDetails": {"updatedAt": "2024-01-01T00:00:00.000Z"},
        })

        assert result.updated_at == "2025-06-01T00:00:00.000Z"

    def test_details_fallback(self):
        result = normalize_execution_status({"swapDetails": {"updatedAt": "2024-01-01T00:00:00.000Z"}})

        assert result.updated_at == "2024-01-01T00:00:00.000Z"


class TestAssets:

    def test_assets_from_quote_request(self):
        result = normalize_execution_status({
            "quoteResponse": {
                "quoteRequest": {
                    "originAsset": "nep141:eth.omft.near",
                    "destinationAsset": "nep141:sol-5ce3bf3a31af18be40ba30f721101b4341690186.omft.near",
                }
            }
        })

        assert result.origin_asset == "nep141:eth.omft.near"
        assert result.destination_asset.startswith("nep141:sol-")

    @pytest.mark.parametrize(
        "payload",
        [
            {"quoteResponse": None},
            {"quoteResponse": "oops"},
            {"quoteResponse": {"quoteRequest": ["x"]}},
            {"quoteResponse": {"quoteRequest": {"originAsset": ""}}},
        ],
    )
    def test_broken_paths_yield_none(self, payload):
        result = normalize_execution_status(payload)

        assert result.origin_asset is None
        assert result.destination_asset is None


class TestSwapDetails:

    def test_zero_is_preserved(self):
        result = normalize_execution_status({"swapDetails": {"amountIn": 0, "refundedAmount": 0, "slippage": 0}})

        assert result.swap_details.amount_in == 0
        assert result.swap_details.refunded_amount == 0
        assert result.swap_details.slippage == 0

    def test_flattened_payload_used_as_details(self):
        result = normalize_execution_status({
            "status": "SUCCESS",
            "amountOutFormatted": "99.5",
            "originChainTxHashes": ["0x1", "0x2"],
        })

        assert result.swap_details.amount_out_formatted == "99.5"
        assert result.swap_details.origin_chain_tx_hashes == ["0x1", "0x2"]

    def test_empty_details_mapping_not_replaced_by_root(self):
        result = normalize_execution_status({"amountIn": "5", "swapDetails": {}})

        assert result.swap_details.amount_in is None

    def test_non_mapping_details_yields_defaults(self):
        result = normalize_execution_status({"amountIn": "5", "swapDetails": "pending"})

        assert result.swap_details.amount_in is None
        _assert_defaults(result.swap_details)

    def test_list_details_ignores_root_hashes(self):
        result = normalize_execution_status({"swapDetails": ["x"], "intentHashes": ["h"]})

        assert result.swap_details.intent_hashes == []

    @pytest.mark.parametrize("details", [None, "", False, 0])
    def test_falsy_details_falls_back_to_root(self, details):
        result = normalize_execution_status({"amountIn": "5", "swapDetails": details})

        assert result.swap_details.amount_in == "5"

    def test_hash_lists_keep_order_and_duplicates(self):
        result = normalize_execution_status({"swapDetails": {"intentHashes": ["b", "a", "b"], "nearTxHashes": ("x",)}})

        assert result.swap_details.intent_hashes == ["b", "a", "b"]
        assert result.swap_details.near_tx_hashes == ["x"]

    def test_non_list_hashes_default(self):
        result = normalize_execution_status({"swapDetails": {"intentHashes": "0xabc", "nearTxHashes": {"0": "x"}}})

        assert result.swap_details.intent_hashes == []
        assert result.swap_details.near_tx_hashes == []

    def test_unexpected_types_default(self):
        result = normalize_execution_status({
            "swapDetails": {
                "amountIn": {"value": "1"},
                "amountOut": True,
                "amountInUsd": float("inf"),
                "refundedAmountUsd": ["1"],
            }
        })

        assert result.swap_details.amount_in is None
        assert result.swap_details.amount_out is None
        assert result.swap_details.amount_in_usd is None
        assert result.swap_details.refunded_amount_usd == "0"

    def test_numbers_pass_through(self):
        result = normalize_execution_status({"swapDetails": {"amountInUsd": 12.5, "refundedAmount": "1000"}})

        assert result.swap_details.amount_in_usd == 12.5
        assert result.swap_details.refunded_amount == "1000"


def test_response_uses_camel_case_keys():
    body = normalize_execution_status({"status": "SUCCESS"}).to_response()

    assert set(body) == {"status", "updatedAt", "originAsset", "destinationAsset", "swapDetails"}
    assert set(body["swapDetails"]) == {
        "amountIn",
        "amountInFormatted",
        "amountInUsd",
        "amountOut",
        "amountOutFormatted",
        "amountOutUsd",
        "depositedAmount",
        "depositedAmountFormatted",
        "depositedAmountUsd",
        "destinationChainTxHashes",
        "intentHashes",
        "nearTxHashes",
        "originChainTxHashes",
        "refundedAmount",
        "refundedAmountFormatted",
        "refundedAmountUsd",
        "slippage",
    }
    assert body["swapDetails"]["refundedAmount"] == "0"
