"""Unit tests for parsing host argument mappings into record commands."""

import pytest

from iprecord.domain.record.command import (
    DeleteRecord,
    Initialize,
    QueryRecord,
    RegisterRecord,
    TransferRecord,
    UpdateDescription,
)
from iprecord.domain.shared.error import InvalidArgumentError, MissingArgumentError


def _encode(args: dict[str, str]) -> dict[str, bytes]:
    return {k: v.encode() for k, v in args.items()}


class TestRegisterRecordArgs:
    def test_parses_all_fields(self, register_args):
        cmd = RegisterRecord.from_args(_encode(register_args))
        assert cmd.id == "C1"
        assert cmd.holder_address == "addrA"
        assert cmd.description == "a painting"

    @pytest.mark.parametrize(
        "missing",
        ["id", "title", "creator_name", "holder_address", "category", "description"],
    )
    def test_every_key_is_mandatory(self, register_args, missing):
        del register_args[missing]
        with pytest.raises(MissingArgumentError) as exc_info:
            RegisterRecord.from_args(_encode(register_args))
        assert exc_info.value.field == missing
        assert exc_info.value.code == "MissingArgument"

    @pytest.mark.parametrize("empty", ["id", "title", "creator_name", "holder_address", "category"])
    def test_identity_fields_must_be_non_empty(self, register_args, empty):
        register_args[empty] = ""
        with pytest.raises(InvalidArgumentError, match=f"{empty} cannot be empty"):
            RegisterRecord.from_args(_encode(register_args))

    def test_description_may_be_empty(self, register_args):
        register_args["description"] = ""
        assert RegisterRecord.from_args(_encode(register_args)).description == ""

    def test_invalid_utf8_is_invalid_argument(self, register_args):
        args = _encode(register_args)
        args["title"] = b"\xff\xfe"
        with pytest.raises(InvalidArgumentError) as exc_info:
            RegisterRecord.from_args(args)
        assert exc_info.value.field == "title"

    def test_extra_keys_are_ignored(self, register_args):
        register_args["unexpected"] = "value"
        assert RegisterRecord.from_args(_encode(register_args)).id == "C1"


class TestOtherCommandArgs:
    def test_initialize_requires_creator(self):
        with pytest.raises(MissingArgumentError):
            Initialize.from_args({})
        with pytest.raises(InvalidArgumentError):
            Initialize.from_args({"creator": b""})

    def test_query_and_delete_require_id(self):
        for command in (QueryRecord, DeleteRecord):
            with pytest.raises(MissingArgumentError):
                command.from_args({})
            with pytest.raises(InvalidArgumentError):
                command.from_args({"id": b""})

    def test_transfer_requires_new_holder(self):
        with pytest.raises(MissingArgumentError):
            TransferRecord.from_args({"id": b"C1"})
        with pytest.raises(InvalidArgumentError):
            TransferRecord.from_args({"id": b"C1", "new_holder_address": b""})

    def test_update_description_defaults_to_empty(self):
        cmd = UpdateDescription.from_args({"id": b"C1"})
        assert cmd.new_description == ""
