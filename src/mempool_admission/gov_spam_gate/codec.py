"""Type-URL message codec: JSON payloads validated with JSON Schema."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
import json
from typing import Any, Callable, Protocol

from jsonschema import Draft202012Validator

from .coins import Coins
from .messages import (
    AUTHZ_MSG_EXEC,
    BANK_MSG_SEND,
    GOV_V1_SUBMIT_PROPOSAL,
    GOV_V1BETA1_SUBMIT_PROPOSAL,
    AnyMsg,
    GenericMsg,
    Msg,
    MsgExec,
    MsgSubmitProposal,
    ProposalFormat,
)


class DecodeError(ValueError):
    """Raised when an encoded message cannot be turned into a typed message."""


class MessageDecoder(Protocol):
    def unpack_any(self, any_msg: AnyMsg) -> Msg:
        ...


_COIN_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["denom", "amount"],
    "properties": {
        "denom": {"type": "string"},
        "amount": {"type": "string", "pattern": "^[0-9]+$"},
    },
    "additionalProperties": False,
}

_COINS_SCHEMA: dict[str, Any] = {"type": "array", "items": _COIN_SCHEMA}

_ANY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["type_url", "value"],
    "properties": {
        "type_url": {"type": "string", "minLength": 1},
        "value": {"type": "string"},
    },
}

V1BETA1_SUBMIT_PROPOSAL_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["initial_deposit", "proposer"],
    "properties": {
        "initial_deposit": _COINS_SCHEMA,
        "proposer": {"type": "string"},
        "content": {"type": "object"},
    },
}

V1_SUBMIT_PROPOSAL_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["initial_deposit", "proposer"],
    "properties": {
        "initial_deposit": _COINS_SCHEMA,
        "proposer": {"type": "string"},
        "messages": {"type": "array", "items": _ANY_SCHEMA},
        "metadata": {"type": "string"},
    },
}

MSG_EXEC_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["grantee", "msgs"],
    "properties": {
        "grantee": {"type": "string", "minLength": 1},
        "msgs": {"type": "array", "items": _ANY_SCHEMA},
    },
}

MSG_SEND_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["from_address", "to_address", "amount"],
    "properties": {
        "from_address": {"type": "string", "minLength": 1},
        "to_address": {"type": "string", "minLength": 1},
        "amount": _COINS_SCHEMA,
    },
}


@dataclass(frozen=True)
class MsgType:
    type_url: str
    validator: Draft202012Validator
    factory: Callable[[dict[str, Any]], Msg]
    encoder: Callable[[Any], dict[str, Any]] | None = None


class JsonMsgCodec:
    """Registry of message types keyed by type URL."""

    def __init__(self, *, register_defaults: bool = True) -> None:
        self._types: dict[str, MsgType] = {}
        if register_defaults:
            self.register(
                GOV_V1BETA1_SUBMIT_PROPOSAL,
                V1BETA1_SUBMIT_PROPOSAL_SCHEMA,
                _proposal_factory(ProposalFormat.V1BETA1),
                _encode_proposal,
            )
            self.register(
                GOV_V1_SUBMIT_PROPOSAL,
                V1_SUBMIT_PROPOSAL_SCHEMA,
                _proposal_factory(ProposalFormat.V1),
                _encode_proposal,
            )
            self.register(AUTHZ_MSG_EXEC, MSG_EXEC_SCHEMA, _exec_from_payload, _encode_exec)
            self.register(BANK_MSG_SEND, MSG_SEND_SCHEMA, _generic_factory(BANK_MSG_SEND), _encode_generic)

    def register(
        self,
        type_url: str,
        schema: dict[str, Any],
        factory: Callable[[dict[str, Any]], Msg],
        encoder: Callable[[Any], dict[str, Any]] | None = None,
    ) -> None:
        Draft202012Validator.check_schema(schema)
        self._types[type_url] = MsgType(
            type_url=type_url,
            validator=Draft202012Validator(schema),
            factory=factory,
            encoder=encoder,
        )

    def unpack_any(self, any_msg: AnyMsg) -> Msg:
        msg_type = self._types.get(any_msg.type_url)
        if msg_type is None:
            raise DecodeError(f"unregistered type_url: {any_msg.type_url!r}")
        try:
            payload = json.loads(bytes(any_msg.value).decode("utf-8"))
        except (ValueError, RecursionError, TypeError) as exc:
            # covers bad UTF-8, bad JSON, runaway nesting and oversized int literals
            raise DecodeError(f"invalid payload for {any_msg.type_url}") from exc
        errors = sorted(msg_type.validator.iter_errors(payload), key=lambda e: e.json_path)
        if errors:
            messages = "; ".join(error.message for error in errors)
            raise DecodeError(f"schema validation failed for {any_msg.type_url}: {messages}")
        try:
            return msg_type.factory(payload)
        except ValueError as exc:
            raise DecodeError(f"invalid {any_msg.type_url}: {exc}") from exc

    def pack_any(self, msg: Msg) -> AnyMsg:
        msg_type = self._types.get(msg.type_url)
        if msg_type is None or msg_type.encoder is None:
            raise DecodeError(f"no encoder registered for {msg.type_url!r}")
        payload = msg_type.encoder(msg)
        value = json.dumps(payload, sort_keys=True, ensure_ascii=True, separators=(",", ":"))
        return AnyMsg(type_url=msg.type_url, value=value.encode("utf-8"))


def _proposal_factory(proposal_format: ProposalFormat) -> Callable[[dict[str, Any]], Msg]:
    def build(payload: dict[str, Any]) -> Msg:
        content = {k: v for k, v in payload.items() if k not in ("initial_deposit", "proposer")}
        return MsgSubmitProposal(
            initial_deposit=Coins.from_payload(payload["initial_deposit"]),
            proposer=payload["proposer"],
            format=proposal_format,
            content=content,
        )

    return build


def _exec_from_payload(payload: dict[str, Any]) -> Msg:
    inner: list[AnyMsg] = []
    for item in payload["msgs"]:
        try:
            value = base64.b64decode(item["value"], validate=True)
        except binascii.Error as exc:
            raise ValueError(f"inner msg value is not base64: {item['type_url']}") from exc
        inner.append(AnyMsg(type_url=item["type_url"], value=value))
    return MsgExec(grantee=payload["grantee"], msgs=tuple(inner))


def _generic_factory(type_url: str) -> Callable[[dict[str, Any]], Msg]:
    def build(payload: dict[str, Any]) -> Msg:
        return GenericMsg(type_url=type_url, body=dict(payload))

    return build


def _encode_proposal(msg: MsgSubmitProposal) -> dict[str, Any]:
    payload: dict[str, Any] = dict(msg.content)
    payload["initial_deposit"] = msg.initial_deposit.to_payload()
    payload["proposer"] = msg.proposer
    return payload


def _encode_exec(msg: MsgExec) -> dict[str, Any]:
    return {
        "grantee": msg.grantee,
        "msgs": [
            {"type_url": inner.type_url, "value": base64.b64encode(inner.value).decode("ascii")}
            for inner in msg.msgs
        ],
    }


def _encode_generic(msg: GenericMsg) -> dict[str, Any]:
    return dict(msg.body)
