"""Parameters exchanged between client and server, in their text wire form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

__all__ = [
    "ComputationParams",
    "C2SEnckeyParam",
    "C2SQueryParam",
    "C2SResreqParam",
    "ServerCalcResult",
    "Srv2CliParam",
]

_NAME_CAPACITY = 1024
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _next_token(tokens: Iterator[str], name: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing value for {name}") from None


def _read_int(tokens: Iterator[str], name: str) -> int:
    token = _next_token(tokens, name)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid integer for {name}: {token!r}") from None


def _read_size(tokens: Iterator[str], name: str) -> int:
    value = _read_int(tokens, name)
    _check_size(value, name)
    return value


def _read_int32(tokens: Iterator[str], name: str) -> int:
    value = _read_int(tokens, name)
    _check_int32(value, name)
    return value


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def _check_int32(value: int, name: str) -> None:
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"{name} is out of the 32-bit range: {value}")


def _check_name(value: str, name: str) -> None:
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"{name} must be a non-empty word: {value!r}")
    if len(value) >= _NAME_CAPACITY:
        raise ValueError(f"{name} is longer than {_NAME_CAPACITY - 1} characters")


@dataclass
class ComputationParams:
    """Image shape, label count, dataset and model names and options of a query."""

    img_width: int
    img_height: int
    img_channels: int
    labels: int
    dataset: str
    model: str
    opt_level: int = 0
    activation: int = 0

    def __post_init__(self) -> None:
        for name in ("img_width", "img_height", "img_channels", "labels"):
            _check_size(getattr(self, name), name)
        _check_name(self.dataset, "dataset")
        _check_name(self.model, "model")
        _check_int32(self.opt_level, "opt_level")
        _check_int32(self.activation, "activation")

    def to_string(self) -> str:
        """Return the fields as one comma-separated line."""
        return ", ".join(
            str(value)
            for value in (
                self.img_width,
                self.img_height,
                self.img_channels,
                self.labels,
                self.dataset,
                self.model,
                self.opt_level,
                self.activation,
            )
        )

    def dumps(self) -> str:
        """Return the wire form: one field per line."""
        return "".join(
            f"{value}\n"
            for value in (
                self.img_width,
                self.img_height,
                self.img_channels,
                self.labels,
                self.dataset,
                self.model,
                self.opt_level,
                self.activation,
            )
        )

    @classmethod
    def loads(cls, text: str) -> "ComputationParams":
        """Parse the wire form written by dumps."""
        return cls._from_tokens(iter(text.split()))

    @classmethod
    def _from_tokens(cls, tokens: Iterator[str]) -> "ComputationParams":
        return cls(
            img_width=_read_size(tokens, "img_width"),
            img_height=_read_size(tokens, "img_height"),
            img_channels=_read_size(tokens, "img_channels"),
            labels=_read_size(tokens, "labels"),
            dataset=_next_token(tokens, "dataset"),
            model=_next_token(tokens, "model"),
            opt_level=_read_int32(tokens, "opt_level"),
            activation=_read_int32(tokens, "activation"),
        )


@dataclass
class C2SEnckeyParam:
    """Sizes of the encryption parameters and keys sent from client to server."""

    key_id: int
    enc_params_stream_sz: int
    pubkey_stream_sz: int
    relinkey_stream_sz: int

    def __post_init__(self) -> None:
        _check_int32(self.key_id, "key_id")
        _check_size(self.enc_params_stream_sz, "enc_params_stream_sz")
        _check_size(self.pubkey_stream_sz, "pubkey_stream_sz")
        _check_size(self.relinkey_stream_sz, "relinkey_stream_sz")

    def dumps(self) -> str:
        return (
            f"{self.key_id}\n"
            f"{self.enc_params_stream_sz}\n"
            f"{self.pubkey_stream_sz}\n"
            f"{self.relinkey_stream_sz}\n"
        )

    @classmethod
    def loads(cls, text: str) -> "C2SEnckeyParam":
        tokens = iter(text.split())
        return cls(
            key_id=_read_int32(tokens, "key_id"),
            enc_params_stream_sz=_read_size(tokens, "enc_params_stream_sz"),
            pubkey_stream_sz=_read_size(tokens, "pubkey_stream_sz"),
            relinkey_stream_sz=_read_size(tokens, "relinkey_stream_sz"),
        )


@dataclass
class C2SQueryParam:
    """Computation parameters and encrypted input size of a client query."""

    comp_params: ComputationParams
    enc_inputs_stream_sz: int
    key_id: int

    def __post_init__(self) -> None:
        _check_size(self.enc_inputs_stream_sz, "enc_inputs_stream_sz")
        _check_int32(self.key_id, "key_id")

    def dumps(self) -> str:
        return (
            self.comp_params.dumps()
            + f"{self.enc_inputs_stream_sz}\n"
            + f"{self.key_id}\n"
        )

    @classmethod
    def loads(cls, text: str) -> "C2SQueryParam":
        tokens = iter(text.split())
        comp_params = ComputationParams._from_tokens(tokens)
        return cls(
            comp_params=comp_params,
            enc_inputs_stream_sz=_read_size(tokens, "enc_inputs_stream_sz"),
            key_id=_read_int32(tokens, "key_id"),
        )


@dataclass
class C2SResreqParam:
    """Identifier of the query whose result the client requests."""

    query_id: int

    def __post_init__(self) -> None:
        _check_int32(self.query_id, "query_id")

    def dumps(self) -> str:
        return f"{self.query_id}\n"

    @classmethod
    def loads(cls, text: str) -> "C2SResreqParam":
        tokens = iter(text.split())
        return cls(query_id=_read_int32(tokens, "query_id"))


class ServerCalcResult(IntEnum):
    """Outcome of a computation on the server."""

    NIL = -1
    SUCCESS = 0
    FAILED = 1


@dataclass
class Srv2CliParam:
    """Result status and encrypted result size sent from server to client."""

    result: ServerCalcResult = ServerCalcResult.NIL
    enc_results_stream_sz: int = field(default=0)

    def __post_init__(self) -> None:
        self.result = ServerCalcResult(self.result)
        _check_size(self.enc_results_stream_sz, "enc_results_stream_sz")

    def dumps(self) -> str:
        return f"{int(self.result)}\n{self.enc_results_stream_sz}"

    @classmethod
    def loads(cls, text: str) -> "Srv2CliParam":
        tokens = iter(text.split())
        raw_result = _read_int32(tokens, "result")
        size = _read_size(tokens, "enc_results_stream_sz")
        try:
            result = ServerCalcResult(raw_result)
        except ValueError:
            raise ValueError(f"unknown result code: {raw_result}") from None
        return cls(result=result, enc_results_stream_sz=size)