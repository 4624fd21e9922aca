"""Parameters of the RPC calls."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from .types import RouteItem


def _serialize(value: Any) -> Any:
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


class RequestParams:
    """Base of the parameter objects; unset optional fields are left out."""

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for field in fields(self):  # type: ignore[arg-type]
            value = getattr(self, field.name)
            if value is not None:
                result[field.name] = _serialize(value)
        return result


@dataclass(frozen=True)
class AmountOrAll:
    """Either a number of satoshi or all available funds."""

    amount: int | None

    def __post_init__(self) -> None:
        if self.amount is None:
            return
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError("amount must be an integer")
        if not 0 <= self.amount < 2**64:
            raise ValueError("amount must be an unsigned 64-bit integer")

    @classmethod
    def all_funds(cls) -> "AmountOrAll":
        return cls(None)

    def to_json(self) -> int | str:
        return "all" if self.amount is None else self.amount


@dataclass(frozen=True)
class GetInfo(RequestParams):
    """'getinfo' command."""


@dataclass(frozen=True)
class FeeRates(RequestParams):
    """'feerates' command."""

    style: str


@dataclass(frozen=True)
class ListNodes(RequestParams):
    """'listnodes' command."""

    id: str | None = None


@dataclass(frozen=True)
class ListChannels(RequestParams):
    """'listchannels' command."""

    short_channel_id: str | None = None
    source: str | None = None
    destination: str | None = None


@dataclass(frozen=True)
class Help(RequestParams):
    """'help' command."""

    command: str | None = None


@dataclass(frozen=True)
class GetLog(RequestParams):
    """'getlog' command."""

    level: str | None = None


@dataclass(frozen=True)
class ListConfigs(RequestParams):
    """'listconfigs' command."""

    config: str | None = None


@dataclass(frozen=True)
class ListPeers(RequestParams):
    """'listpeers' command."""

    id: str | None = None
    level: str | None = None


@dataclass(frozen=True)
class ListInvoices(RequestParams):
    """'listinvoices' command."""

    label: str | None = None
    invstring: str | None = None
    payment_hash: str | None = None
    offer_id: str | None = None


@dataclass(frozen=True)
class CreateInvoice(RequestParams):
    """'createinvoice' command."""

    invstring: str
    label: str
    preimage: str


@dataclass(frozen=True)
class Invoice(RequestParams):
    """'invoice' command with an amount."""

    amount_msat: int
    label: str
    description: str
    preimage: str | None = None
    expiry: int | None = None
    deschashonly: bool | None = None


@dataclass(frozen=True)
class AnyInvoice(RequestParams):
    """'invoice' command without a fixed amount."""

    amount_msat: str
    label: str
    description: str
    preimage: str | None = None
    expiry: int | None = None
    deschashonly: bool | None = None


@dataclass(frozen=True)
class DelInvoice(RequestParams):
    """'delinvoice' command."""

    label: str
    status: str


@dataclass(frozen=True)
class DelExpiredInvoice(RequestParams):
    """'delexpiredinvoice' command."""

    maxexpirytime: int | None = None


@dataclass(frozen=True)
class AutoCleanInvoice(RequestParams):
    """'autocleaninvoice' command."""

    cycle_seconds: int | None = None
    expired_by: int | None = None


@dataclass(frozen=True)
class WaitAnyInvoice(RequestParams):
    """'waitanyinvoice' command."""

    lastpay_index: int | None = None


@dataclass(frozen=True)
class WaitInvoice(RequestParams):
    """'waitinvoice' command."""

    label: str


@dataclass(frozen=True)
class Pay(RequestParams):
    """'pay' command."""

    bolt11: str
    msatoshi: int | None = None
    description: str | None = None
    riskfactor: float | None = None
    maxfeepercent: float | None = None
    exemptfee: int | None = None
    retry_for: int | None = None
    maxdelay: int | None = None


@dataclass(frozen=True)
class SendPay(RequestParams):
    """'sendpay' command."""

    route: list[RouteItem]
    payment_hash: str
    description: str | None = None
    msatoshi: int | None = None


@dataclass(frozen=True)
class WaitSendPay(RequestParams):
    """'waitsendpay' command."""

    payment_hash: str
    timeout: int


@dataclass(frozen=True)
class ListSendPays(RequestParams):
    """'listsendpays' command."""

    bolt11: str | None = None
    payment_hash: str | None = None


@dataclass(frozen=True)
class DecodePay(RequestParams):
    """'decodepay' command."""

    bolt11: str
    description: str | None = None


@dataclass(frozen=True)
class GetRoute(RequestParams):
    """'getroute' command."""

    id: str
    msatoshi: int
    riskfactor: float
    cltv: int | None = None
    fromid: str | None = None
    fuzzpercent: float | None = None
    seed: str | None = None


@dataclass(frozen=True)
class Connect(RequestParams):
    """'connect' command."""

    id: str
    host: str | None = None


@dataclass(frozen=True)
class Disconnect(RequestParams):
    """'disconnect' command."""

    id: str


@dataclass(frozen=True)
class FundChannel(RequestParams):
    """'fundchannel' command."""

    id: str
    amount: AmountOrAll
    feerate: int | None = None


@dataclass(frozen=True)
class Close(RequestParams):
    """'close' command."""

    id: str
    force: bool | None = None
    timeout: int | None = None


@dataclass(frozen=True)
class Ping(RequestParams):
    """'ping' command."""

    id: str
    len: int | None = None
    pongbytes: int | None = None


@dataclass(frozen=True)
class ListFunds(RequestParams):
    """'listfunds' command."""


@dataclass(frozen=True)
class Withdraw(RequestParams):
    """'withdraw' command."""

    destination: str
    satoshi: AmountOrAll
    feerate: int | None = None
    minconf: int | None = None


@dataclass(frozen=True)
class NewAddr(RequestParams):
    """'newaddr' command."""

    addresstype: str | None = None


@dataclass(frozen=True)
class Stop(RequestParams):
    """'stop' command."""