import json
from unittest.mock import patch

import pytest

from sqids_codec import lambda_function
from sqids_codec.exceptions import InvalidMessageException
from sqids_codec.sqids import Sqids

encode_message = {"action": "encode", "numbers": [1, 2, 3]}
decode_message = {"action": "decode", "id": "86Rf07"}


def sns_event(*messages):
    return {"Records": [{"Sns": {"Message": json.dumps(message)}} for message in messages]}


class TestMessage:
    def test_encode_message(self):
        message = lambda_function.Message.from_message(encode_message)
        assert isinstance(message, lambda_function.EncodeMessage)
        assert message.get_numbers() == [1, 2, 3]

    def test_decode_message(self):
        message = lambda_function.Message.from_message(decode_message)
        assert isinstance(message, lambda_function.DecodeMessage)
        assert message.get_id() == "86Rf07"

    def test_unknown_action(self):
        with pytest.raises(InvalidMessageException, match="Did not recognise"):
            lambda_function.Message.from_message({"action": "hash", "id": "86Rf07"})

    @pytest.mark.parametrize("numbers", [None, "1,2,3", [1, "2"], [True]])
    def test_malformed_encode_message(self, numbers):
        message = lambda_function.Message.from_message({"action": "encode", "numbers": numbers})
        with pytest.raises(InvalidMessageException, match="list of integers"):
            message.process(Sqids())

    def test_malformed_decode_message(self):
        message = lambda_function.Message.from_message({"action": "decode"})
        with pytest.raises(InvalidMessageException, match="please supply an id"):
            message.process(Sqids())


class TestAllMessages:
    def test_all_messages(self):
        messages = lambda_function.all_messages(sns_event(encode_message, decode_message))
        assert [message.action for message in messages] == ["encode", "decode"]


@patch("sqids_codec.lambda_function.sqids", Sqids())
class TestHandler:
    def test_handler_encodes_and_decodes(self, capsys):
        result = lambda_function.handler(event=sns_event(encode_message, decode_message), context=None)

        assert result == {
            "results": [
                {"action": "encode", "numbers": [1, 2, 3], "id": "86Rf07"},
                {"action": "decode", "id": "86Rf07", "numbers": [1, 2, 3]},
            ],
        }
        log = capsys.readouterr().out
        assert "Received Message" in log
        assert "Processed 2 messages" in log

    def test_handler_decodes_malformed_id_to_nothing(self):
        result = lambda_function.handler(event=sns_event({"action": "decode", "id": "*"}), context=None)
        assert result["results"][0]["numbers"] == []

    def test_handler_raises_on_out_of_range_number(self):
        with pytest.raises(ValueError):
            lambda_function.handler(event=sns_event({"action": "encode", "numbers": [-1]}), context=None)

    def test_handler_raises_on_invalid_message(self):
        with pytest.raises(InvalidMessageException):
            lambda_function.handler(event=sns_event({"action": "shred"}), context=None)
