import pytest

from retromark.errors import MarkerTargetError
from retromark.markers.base import MethodMarker, attach, find_marker, markers_of
from retromark.markers.http import GET, POST, PUT, HttpMethod
from retromark.markers.method import Headers, Timeout


class UserService:
    @GET("/users/{id}")
    @Headers("Accept: application/json")
    def get_user(self, id):
        ...

    @PUT("/users/{id}")
    def update_user(self, id, user):
        ...

    @POST("/ping")
    @staticmethod
    def ping():
        ...

    def helper(self):
        ...


def test_decorator_returns_function_unchanged():
    def f():
        return 42

    assert GET("/x")(f) is f
    assert f() == 42


def test_markers_kept_in_source_order():
    found = markers_of(UserService.get_user)
    assert found == (GET("/users/{id}"), Headers("Accept: application/json"))


def test_markers_filtered_by_kind():
    assert markers_of(UserService.get_user, HttpMethod) == (GET("/users/{id}"),)
    assert markers_of(UserService.get_user, Timeout) == ()


def test_find_marker():
    assert find_marker(UserService.update_user, HttpMethod).route() == ("PUT", "/users/{id}")
    assert find_marker(UserService.update_user, Headers) is None
    assert find_marker(UserService.helper, HttpMethod) is None


def test_bound_and_static_methods():
    svc = UserService()
    assert find_marker(svc.get_user, HttpMethod) == GET("/users/{id}")
    assert find_marker(UserService.ping, HttpMethod) == POST("/ping")


def test_attach_directly():
    def f():
        ...

    attach(f, Timeout(10))
    attach(f, GET("/a"))
    assert markers_of(f) == (GET("/a"), Timeout(10))


def test_non_callable_target_rejected():
    with pytest.raises(MarkerTargetError) as exc_info:
        GET("/x")("not a function")
    assert exc_info.value.target == "not a function"
    assert isinstance(exc_info.value, TypeError)


def test_target_without_attributes_rejected():
    # builtins cannot carry attributes
    with pytest.raises(MarkerTargetError):
        GET("/x")(len)


def test_subclass_does_not_inherit_markers():
    @GET("/base")
    class Base:
        def __call__(self):
            ...

    class Child(Base):
        pass

    assert markers_of(Base) == (GET("/base"),)
    assert markers_of(Child) == ()


def test_method_marker_target():
    assert issubclass(GET, MethodMarker)
    assert GET.target == "method"
