"""This file contains code which is used to understand an incoming message and encode or decode the IDs it asks about."""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any

import rollbar
from dotenv import load_dotenv

from .exceptions import InvalidMessageException
from .options import SqidsOptions
from .sqids import Sqids

logger = logging.getLogger("sqids")
logger.setLevel(logging.DEBUG)

load_dotenv()

rollbar.init(os.getenv("ROLLBAR_TOKEN"), environment=os.getenv("ROLLBAR_ENV"))

sqids = SqidsOptions.from_environment().build()


class Message(ABC):
    @classmethod
    def from_message(cls, message: dict) -> "Message":
        action = message.get("action")
        if action == "encode":
            return EncodeMessage(message)
        elif action == "decode":
            return DecodeMessage(message)
        else:
            raise InvalidMessageException(f"Did not recognise message action. {message}")

    def __init__(self, message: dict) -> None:
        self.message = message

    @property
    @abstractmethod
    def action(self) -> str: ...

    @abstractmethod
    def process(self, codec: Sqids) -> dict[str, Any]: ...


class EncodeMessage(Message):
    @property
    def action(self) -> str:
        return "encode"

    def get_numbers(self) -> list[int]:
        numbers = self.message.get("numbers")
        if not isinstance(numbers, list) or not all(
            isinstance(number, int) and not isinstance(number, bool) for number in numbers
        ):
            raise InvalidMessageException(f"Malformed encode message, please supply a list of integers. {self.message}")
        return numbers

    def process(self, codec: Sqids) -> dict[str, Any]:
        numbers = self.get_numbers()
        return {"action": self.action, "numbers": numbers, "id": codec.encode(numbers)}


class DecodeMessage(Message):
    @property
    def action(self) -> str:
        return "decode"

    def get_id(self) -> str:
        id = self.message.get("id")
        if not isinstance(id, str):
            raise InvalidMessageException(f"Malformed decode message, please supply an id. {self.message}")
        return id

    def process(self, codec: Sqids) -> dict[str, Any]:
        id = self.get_id()
        return {"action": self.action, "id": id, "numbers": codec.decode(id)}


def all_messages(event) -> list[Message]:
    """All the messages in the SNS event, as Message subclasses"""
    decoder = json.decoder.JSONDecoder()
    messages_as_decoded_json = [decoder.decode(record["Sns"]["Message"]) for record in event["Records"]]
    return [Message.from_message(message) for message in messages_as_decoded_json]


@rollbar.lambda_function
def handler(event, context):
    results = []
    for message in all_messages(event):
        print(f"Received Message: {message.message}")
        result = message.process(sqids)
        logger.info(f"Processed {message.action} message: {result}")
        results.append(result)

    print(f"Processed {len(results)} messages")
    return {"results": results}
