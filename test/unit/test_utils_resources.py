"""
리소스 읽기 및 URI/모델/ID 유틸리티 단위 테스트
"""

import uuid
from enum import Enum

import pytest

from basekit.core.exceptions import ApplicationError, ResourceReadError
from basekit.utils.id_generator import guid, is_valid_uuid
from basekit.utils.model import extract_property, enum_to_str, clone_object
from basekit.utils.resources import read_as_bytes, read_as_string
from basekit.utils.uri import get_base_url, get_uri, has_host


class TestResources:
    """리소스 읽기 테스트"""

    def test_read_file(self, tmp_path):
        """파일 시스템 경로 읽기"""
        path = tmp_path / "data.txt"
        path.write_bytes("값=1".encode("utf-8"))

        assert read_as_bytes(path) == "값=1".encode("utf-8")
        assert read_as_string(str(path)) == "값=1"

    def test_read_package_resource(self):
        """패키지 리소스 읽기"""
        content = read_as_string("__init__.py", anchor="basekit.utils")
        assert "__all__" in content

    def test_missing_file(self, tmp_path):
        """없는 파일은 ResourceReadError"""
        with pytest.raises(ResourceReadError) as exc_info:
            read_as_bytes(tmp_path / "missing.txt")

        assert isinstance(exc_info.value, ApplicationError)
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_missing_package(self):
        with pytest.raises(ResourceReadError):
            read_as_bytes("x.txt", anchor="basekit_no_such_package")


class TestUri:
    """URI 조합 테스트"""

    def test_get_uri_standard_ports(self):
        """표준 포트는 생략"""
        assert get_uri("https", "api.host", 443, "/ping") == "https://api.host/ping"
        assert get_uri("http", "api.host", 80, "/ping") == "http://api.host/ping"

    def test_get_uri_custom_port(self):
        assert get_uri("http", "api.host", 8080, "/ping") == "http://api.host:8080/ping"

    def test_relative_path_without_slash(self):
        assert get_uri("http", "h", 80, "ping") == "http://h/ping"

    def test_absolute_path_kept(self):
        """전체 URL은 그대로 반환"""
        url = "http://localhost:9090/ping"
        assert get_uri("https", "api.host", 443, url) == url

    def test_base_url_and_has_host(self):
        assert get_base_url("http", "h", 9000) == "http://h:9000"
        assert has_host("https://h/x") is True
        assert has_host("/x") is False


class _Nested:
    def __init__(self, id=None):
        self.id = id


class _Upper:
    def __init__(self, nested=None):
        self.nested = nested


class _Level(Enum):
    ONE = 1
    TWO = 2


class TestModel:
    """모델 유틸리티 테스트"""

    def test_extract_property(self):
        """중간 값이 None이면 None"""
        model = _Upper()
        assert extract_property(model.nested, lambda n: n.id, lambda i: "@" + i) is None

        model.nested = _Nested()
        assert extract_property(model.nested, lambda n: n.id, lambda i: "@" + i) is None

        model.nested = _Nested("SG")
        assert extract_property(model.nested, lambda n: n.id, lambda i: "@" + i) == "@SG"

    def test_enum_to_str(self):
        assert enum_to_str([_Level.ONE, _Level.TWO]) == ["ONE", "TWO"]

    def test_clone_object(self):
        """복사 가능한 객체는 복사본 반환"""
        original = [1, 2]
        cloned = clone_object(original)

        assert cloned == original
        assert cloned is not original
        assert clone_object(None) is None

    def test_clone_uncopyable(self):
        """복사할 수 없는 객체는 원본 반환"""
        class Uncopyable:
            def __copy__(self):
                raise TypeError("no copy")

        obj = Uncopyable()
        assert clone_object(obj) is obj


class TestIdGenerator:
    """ID 생성 테스트"""

    def test_guid(self):
        value = guid()

        assert len(value) == 36
        assert uuid.UUID(value).version == 4
        assert guid() != value

    def test_is_valid_uuid(self):
        assert is_valid_uuid(guid()) is True
        assert is_valid_uuid("not-a-uuid") is False
