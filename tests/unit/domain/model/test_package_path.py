"""Tests for domain/model/package_path.py."""

import pytest

from cleanarch.domain.model.package_path import PackagePath


class TestParse:
    """Tests for PackagePath.parse."""

    def test_splits_segments(self) -> None:
        assert PackagePath.parse("a.b.c").segments == ("a", "b", "c")

    def test_empty_is_root(self) -> None:
        path = PackagePath.parse("")
        assert path.is_root
        assert path.last is None
        assert str(path) == ""

    @pytest.mark.parametrize("dotted", ["a..b", "a.", ".a"])
    def test_empty_segment_raises(self, dotted: str) -> None:
        with pytest.raises(ValueError, match="empty segment"):
            PackagePath.parse(dotted)

    def test_segment_with_dot_raises(self) -> None:
        with pytest.raises(ValueError, match="must not contain"):
            PackagePath(("a.b",))


class TestPackagePath:
    """Tests for PackagePath behaviour."""

    def test_str_roundtrip(self) -> None:
        assert str(PackagePath.parse("com.shop.core")) == "com.shop.core"

    def test_last(self) -> None:
        assert PackagePath.parse("a.b.request").last == "request"

    def test_equality_is_segment_wise(self) -> None:
        assert PackagePath.parse("a.b") == PackagePath(("a", "b"))

    def test_ordering(self) -> None:
        assert PackagePath.parse("a.b") < PackagePath.parse("a.c")

    def test_is_prefix_of(self) -> None:
        assert PackagePath.parse("a").is_prefix_of(PackagePath.parse("a.b"))
        assert not PackagePath.parse("a.b").is_prefix_of(PackagePath.parse("a"))
        assert not PackagePath.parse("ab").is_prefix_of(PackagePath.parse("abc"))


class TestStripFromLast:
    """Tests for PackagePath.strip_from_last."""

    def test_cuts_before_segment(self) -> None:
        path = PackagePath.parse("app.order.request")
        assert path.strip_from_last("request") == PackagePath.parse("app.order")

    def test_nested_below_segment(self) -> None:
        path = PackagePath.parse("app.order.request.v2")
        assert path.strip_from_last("request") == PackagePath.parse("app.order")

    def test_uses_last_occurrence(self) -> None:
        path = PackagePath.parse("request.app.request")
        assert path.strip_from_last("request") == PackagePath.parse("request.app")

    def test_missing_segment(self) -> None:
        assert PackagePath.parse("app.order").strip_from_last("request") is None

    def test_segment_is_matched_whole(self) -> None:
        """'requests' is not the 'request' segment."""
        assert PackagePath.parse("app.requests").strip_from_last("request") is None
