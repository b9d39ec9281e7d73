import os
import types
from unittest import mock

import psutil
import pytest

from nacoskit.rfcuuid import (
    NAMESPACE_DNS,
    NAMESPACE_URL,
    Domain,
    UUIDError,
    Variant,
    Version,
    from_string,
)
from nacoskit.uuidgen import (
    RFC4122Generator,
    default_hw_addr,
    new_v1,
    new_v2,
    new_v3,
    new_v4,
    new_v5,
)


class FaultyReader:
    def __init__(self, read_to_fail=0):
        self.calls = 0
        self.read_to_fail = read_to_fail

    def __call__(self, count):
        self.calls += 1
        if self.calls - 1 == self.read_to_fail:
            raise OSError("io: reader is faulty")
        return os.urandom(count)


def _no_hw_addr():
    raise UUIDError("uuid: no hw address found")


def test_new_v1():
    u1 = new_v1()
    assert u1.version() == Version.V1
    assert u1.variant() == Variant.RFC4122
    u2 = new_v1()
    assert u1 != u2


def test_new_v1_epoch_stale():
    gen = RFC4122Generator(epoch_func=lambda: 0, hw_addr_func=_no_hw_addr)
    u1 = gen.new_v1()
    u2 = gen.new_v1()
    assert u1 != u2
    assert u1.raw[:8] == u2.raw[:8]


def test_new_v1_faulty_rand():
    gen = RFC4122Generator(hw_addr_func=_no_hw_addr, rand=FaultyReader())
    with pytest.raises(OSError):
        gen.new_v1()


def test_new_v1_missing_network_interfaces():
    gen = RFC4122Generator(hw_addr_func=_no_hw_addr)
    u = gen.new_v1()
    assert u.version() == Version.V1
    assert u.raw[10] & 0x01 == 0x01


def test_new_v1_missing_interfaces_and_faulty_rand():
    gen = RFC4122Generator(hw_addr_func=_no_hw_addr, rand=FaultyReader(read_to_fail=1))
    with pytest.raises(OSError):
        gen.new_v1()


def test_new_v1_uses_hardware_address():
    hw = bytes([0x02, 0x00, 0x5E, 0x10, 0x20, 0x30])
    gen = RFC4122Generator(hw_addr_func=lambda: hw)
    u = gen.new_v1()
    assert u.raw[10:] == hw


def test_new_v2():
    u1 = new_v2(Domain.PERSON)
    assert u1.version() == Version.V2
    assert u1.variant() == Variant.RFC4122
    u2 = new_v2(Domain.GROUP)
    assert u2.version() == Version.V2
    assert u2.variant() == Variant.RFC4122
    u3 = new_v2(Domain.ORG)
    assert u3.version() == Version.V2
    assert u3.variant() == Variant.RFC4122


@pytest.mark.parametrize("domain", list(Domain))
def test_new_v2_stores_domain(domain):
    gen = RFC4122Generator(hw_addr_func=_no_hw_addr)
    assert gen.new_v2(domain).raw[9] == int(domain)


def test_new_v2_faulty_rand():
    gen = RFC4122Generator(hw_addr_func=_no_hw_addr, rand=FaultyReader())
    with pytest.raises(OSError):
        gen.new_v2(Domain.PERSON)


def test_new_v3():
    u1 = new_v3(NAMESPACE_DNS, "www.example.com")
    assert u1.version() == Version.V3
    assert u1.variant() == Variant.RFC4122
    assert str(u1) == "5df41881-3aed-3515-88a7-2f4a814cf09e"
    u2 = new_v3(NAMESPACE_DNS, "example.com")
    assert u2 != u1
    u3 = new_v3(NAMESPACE_DNS, "example.com")
    assert u3 == u2
    u4 = new_v3(NAMESPACE_URL, "example.com")
    assert u4 != u3


def test_new_v4():
    u1 = new_v4()
    assert u1.version() == Version.V4
    assert u1.variant() == Variant.RFC4122
    u2 = new_v4()
    assert u1 != u2


def test_new_v4_faulty_rand():
    gen = RFC4122Generator(rand=FaultyReader())
    with pytest.raises(OSError):
        gen.new_v4()


def test_new_v4_partial_read():
    gen = RFC4122Generator(rand=lambda count: os.urandom(1))
    u = gen.new_v4()
    assert u.raw.count(0) < 10
    assert u.version() == Version.V4


def test_new_v4_exhausted_rand():
    gen = RFC4122Generator(rand=lambda count: b"")
    with pytest.raises(UUIDError):
        gen.new_v4()


def test_new_v5():
    u1 = new_v5(NAMESPACE_DNS, "www.example.com")
    assert u1.version() == Version.V5
    assert u1.variant() == Variant.RFC4122
    assert str(u1) == "2ed6657d-e927-568b-95e1-2665a8aea6a2"
    u2 = new_v5(NAMESPACE_DNS, "example.com")
    assert u2 != u1
    u3 = new_v5(NAMESPACE_DNS, "example.com")
    assert u3 == u2
    u4 = new_v5(NAMESPACE_URL, "example.com")
    assert u4 != u3


def test_generated_uuid_text_round_trip():
    u = new_v4()
    parsed = from_string(str(u))
    assert parsed == u
    assert parsed.version() == Version.V4


def test_default_hw_addr_reads_link_address():
    fake = {
        "lo": [types.SimpleNamespace(family=psutil.AF_LINK, address="00:00:00:00:00:00")],
        "eth0": [types.SimpleNamespace(family=psutil.AF_LINK, address="02:00:00:00:00:01")],
    }
    with mock.patch("nacoskit.uuidgen.psutil.net_if_addrs", return_value=fake):
        assert default_hw_addr() == bytes([0x02, 0, 0, 0, 0, 0x01])


def test_default_hw_addr_none_found():
    with mock.patch("nacoskit.uuidgen.psutil.net_if_addrs", return_value={}):
        with pytest.raises(UUIDError):
            default_hw_addr()