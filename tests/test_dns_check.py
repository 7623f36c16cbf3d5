"""Tests for the DNS existence check.

The resolver is a ``MagicMock`` standing in for ``dns.resolver.Resolver``;
``resolve`` side effects are keyed by record type so no real DNS traffic is
generated.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import dns.exception
import dns.resolver

from seokit.crawler.dns_check import domain_exists


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolver(answers: dict) -> MagicMock:
    """Build a resolver whose ``resolve(domain, rdtype)`` looks up *answers*.

    Values that are exception instances are raised; record types missing from
    *answers* raise ``NoAnswer``.
    """
    resolver = MagicMock()

    def _resolve(domain, rdtype):
        result = answers.get(rdtype, dns.resolver.NoAnswer())
        if isinstance(result, BaseException):
            raise result
        return result

    resolver.resolve.side_effect = _resolve
    return resolver


def _queried_types(resolver: MagicMock) -> list[str]:
    return [c.args[1] for c in resolver.resolve.call_args_list]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestDomainExists:
    def test_a_record_short_circuits(self) -> None:
        resolver = _resolver({"A": ["93.184.216.34"]})
        assert domain_exists("example.com", resolver=resolver) is True
        assert _queried_types(resolver) == ["A"]

    def test_falls_through_to_aaaa(self) -> None:
        resolver = _resolver({"AAAA": ["2606:2800:220:1::"]})
        assert domain_exists("example.com", resolver=resolver) is True
        assert _queried_types(resolver) == ["A", "AAAA"]

    def test_cname_then_any_order(self) -> None:
        resolver = _resolver({"ANY": ["something"]})
        assert domain_exists("example.com", resolver=resolver) is True
        assert _queried_types(resolver) == ["A", "AAAA", "CNAME", "ANY"]

    def test_empty_answer_is_not_a_hit(self) -> None:
        resolver = _resolver({"A": [], "CNAME": ["alias.example.net."]})
        assert domain_exists("example.com", resolver=resolver) is True
        assert _queried_types(resolver) == ["A", "AAAA", "CNAME"]

    def test_nxdomain_everywhere_means_absent(self) -> None:
        nx = dns.resolver.NXDOMAIN()
        resolver = _resolver({"A": nx, "AAAA": nx, "CNAME": nx, "ANY": nx})
        assert domain_exists("no-such-domain.invalid", resolver=resolver) is False
        assert len(resolver.resolve.call_args_list) == 4

    def test_benign_errors_are_not_warned(self) -> None:
        resolver = _resolver(
            {
                "A": dns.resolver.NXDOMAIN(),
                "AAAA": dns.resolver.NoAnswer(),
                "CNAME": dns.resolver.NoNameservers(),
            }
        )
        with patch("seokit.crawler.dns_check.logger") as mock_logger:
            assert domain_exists("example.com", resolver=resolver) is False
        mock_logger.warning.assert_not_called()

    def test_other_errors_are_logged_and_skipped(self) -> None:
        resolver = _resolver(
            {"A": dns.exception.Timeout(), "AAAA": ["2606:2800:220:1::"]}
        )
        with patch("seokit.crawler.dns_check.logger") as mock_logger:
            assert domain_exists("example.com", resolver=resolver) is True
        mock_logger.warning.assert_called_once()

    def test_lifetime_is_bounded_by_settings(self, monkeypatch) -> None:
        monkeypatch.setattr("seokit.crawler.dns_check.settings.dns_timeout", 2.5)
        resolver = _resolver({"A": ["127.0.0.1"]})
        domain_exists("example.com", resolver=resolver)
        assert resolver.lifetime == 2.5

    def test_default_resolver_is_created(self) -> None:
        with patch("dns.resolver.Resolver") as mock_cls:
            mock_cls.return_value = _resolver({"A": ["127.0.0.1"]})
            assert domain_exists("example.com") is True
        mock_cls.assert_called_once_with()

    def test_missing_resolver_configuration_means_absent(self) -> None:
        with patch(
            "dns.resolver.Resolver", side_effect=dns.resolver.NoResolverConfiguration()
        ), patch("seokit.crawler.dns_check.logger") as mock_logger:
            assert domain_exists("example.com") is False
        mock_logger.warning.assert_called_once()
