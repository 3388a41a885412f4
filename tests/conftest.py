import rollbar
from pytest import fixture

from sqids_codec.sqids import Sqids

rollbar.init(access_token=None, enabled=False)


@fixture
def default_sqids():
    return Sqids()


@fixture
def unblocked_sqids():
    "A codec with the default alphabet but nothing blocked"
    return Sqids(blocklist=set())
