"""Tests for the gateway operations over the credential store."""

from unittest.mock import patch

import pytest

from track_stash.domain import gateway
from track_stash.domain.credentials import CredentialStore, SessionCredential
from track_stash.domain.spotify.exceptions import (
    AuthorizationDeniedError,
    SpotifyAPIError,
    TokenRequestError,
)


@pytest.fixture
def store() -> CredentialStore:
    return CredentialStore()


@pytest.fixture
def authorized_store() -> CredentialStore:
    return CredentialStore(SessionCredential("acc-1", "ref-1"))


class TestExchangeCode:
    def test_stores_both_tokens(self, store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.auth.exchange_code",
            return_value={"access_token": "acc", "refresh_token": "ref"},
        ) as mock_exchange:
            credential = gateway.exchange_code(store, spotify_config, "code")

        mock_exchange.assert_called_once_with(spotify_config, "code")
        assert credential == SessionCredential("acc", "ref")
        assert store.get() == credential

    def test_failure_leaves_store_unset(self, store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.auth.exchange_code",
            side_effect=TokenRequestError("boom", status_code=400),
        ):
            with pytest.raises(TokenRequestError):
                gateway.exchange_code(store, spotify_config, "code")

        assert store.get() == SessionCredential()

    def test_missing_code_makes_no_token_call(self, store, spotify_config) -> None:
        with patch("track_stash.domain.gateway.auth.exchange_code") as mock_exchange:
            with pytest.raises(AuthorizationDeniedError):
                gateway.exchange_code(store, spotify_config, None)

        mock_exchange.assert_not_called()

    def test_provider_error_makes_no_token_call(self, store, spotify_config) -> None:
        with patch("track_stash.domain.gateway.auth.exchange_code") as mock_exchange:
            with pytest.raises(AuthorizationDeniedError, match="access_denied"):
                gateway.exchange_code(store, spotify_config, None, error="access_denied")

        mock_exchange.assert_not_called()


class TestRefreshAccessToken:
    def test_without_refresh_token_makes_no_call(self, store, spotify_config) -> None:
        with patch("track_stash.domain.gateway.auth.refresh_access_token") as mock_refresh:
            assert gateway.refresh_access_token(store, spotify_config) is False

        mock_refresh.assert_not_called()
        assert store.get() == SessionCredential()

    def test_replaces_access_token_only(self, authorized_store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.auth.refresh_access_token",
            return_value={"access_token": "acc-2", "refresh_token": "rotated"},
        ) as mock_refresh:
            assert gateway.refresh_access_token(authorized_store, spotify_config) is True

        mock_refresh.assert_called_once_with(spotify_config, "ref-1")
        assert authorized_store.get() == SessionCredential("acc-2", "ref-1")

    def test_failure_keeps_stale_token(self, authorized_store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.auth.refresh_access_token",
            side_effect=TokenRequestError("expired", status_code=400),
        ):
            assert gateway.refresh_access_token(authorized_store, spotify_config) is False

        assert authorized_store.get() == SessionCredential("acc-1", "ref-1")

    def test_keeps_refresh_token_from_login_during_refresh(
        self, authorized_store, spotify_config
    ) -> None:
        """A login that completes while the refresh call is in flight wins."""

        def login_mid_refresh(config, refresh_token):
            authorized_store.set("acc-new", "ref-new")
            return {"access_token": "acc-2"}

        with patch(
            "track_stash.domain.gateway.auth.refresh_access_token",
            side_effect=login_mid_refresh,
        ):
            assert gateway.refresh_access_token(authorized_store, spotify_config) is True

        assert authorized_store.get() == SessionCredential("acc-2", "ref-new")


class TestAddCurrentTrack:
    def test_unauthorized_makes_no_request(self, store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.api.get_currently_playing_uri"
        ) as mock_current, patch(
            "track_stash.domain.gateway.api.add_tracks_to_playlist"
        ) as mock_add:
            with pytest.raises(SpotifyAPIError, match="not authorized"):
                gateway.add_current_track(store, spotify_config)

        mock_current.assert_not_called()
        mock_add.assert_not_called()

    def test_nothing_playing_skips_append(self, authorized_store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.api.get_currently_playing_uri", return_value=None
        ), patch("track_stash.domain.gateway.api.add_tracks_to_playlist") as mock_add:
            outcome = gateway.add_current_track(authorized_store, spotify_config)

        assert outcome is gateway.AddTrackOutcome.NOTHING_PLAYING
        mock_add.assert_not_called()

    def test_appends_playing_track(self, authorized_store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.api.get_currently_playing_uri",
            return_value="spotify:track:abc",
        ) as mock_current, patch(
            "track_stash.domain.gateway.api.add_tracks_to_playlist"
        ) as mock_add:
            outcome = gateway.add_current_track(authorized_store, spotify_config)

        assert outcome is gateway.AddTrackOutcome.ADDED
        mock_current.assert_called_once_with("acc-1")
        mock_add.assert_called_once_with("acc-1", "playlist-789", ["spotify:track:abc"])

    def test_append_failure_propagates(self, authorized_store, spotify_config) -> None:
        with patch(
            "track_stash.domain.gateway.api.get_currently_playing_uri",
            return_value="spotify:track:abc",
        ), patch(
            "track_stash.domain.gateway.api.add_tracks_to_playlist",
            side_effect=SpotifyAPIError("forbidden", status_code=403),
        ):
            with pytest.raises(SpotifyAPIError):
                gateway.add_current_track(authorized_store, spotify_config)

    def test_same_track_twice_appends_twice(self, authorized_store, spotify_config) -> None:
        """No deduplication: every call appends."""
        with patch(
            "track_stash.domain.gateway.api.get_currently_playing_uri",
            return_value="spotify:track:abc",
        ), patch("track_stash.domain.gateway.api.add_tracks_to_playlist") as mock_add:
            gateway.add_current_track(authorized_store, spotify_config)
            gateway.add_current_track(authorized_store, spotify_config)

        assert mock_add.call_count == 2


def test_authorize_url_uses_config(spotify_config) -> None:
    assert "client_id=client-123" in gateway.authorize_url(spotify_config)
