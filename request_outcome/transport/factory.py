"""Factory turning request builders into observed calls."""

import functools
from collections.abc import Callable
from typing import Any, Concatenate, ParamSpec

import httpx

from request_outcome.auth.provider import AuthTokenProvider
from request_outcome.outcome.classifier import OutcomeClassifier
from request_outcome.transport.call import ObservedCall
from request_outcome.transport.secured import get_parser, is_secured


P = ParamSpec("P")


class CallFactory:
    """Creates ObservedCall instances sharing a client and classifier."""

    def __init__(
        self,
        client: httpx.Client,
        auth_token_provider: AuthTokenProvider | None = None,
        classifier: OutcomeClassifier | None = None,
    ) -> None:
        self._client = client
        self._auth_token_provider = auth_token_provider
        self._classifier = classifier or OutcomeClassifier()

    def create(
        self,
        request: httpx.Request,
        *,
        secured: bool = False,
        parse: Callable[[httpx.Response], Any] | None = None,
    ) -> ObservedCall[Any]:
        """Wrap a built request.

        Raises:
            CallConfigurationError: If secured and no provider is configured.
        """
        return ObservedCall(
            self._client,
            request,
            secured=secured,
            auth_token_provider=self._auth_token_provider,
            classifier=self._classifier,
            parse=parse,
        )

    def wrap(
        self,
        builder: Callable[Concatenate[httpx.Client, P], httpx.Request],
    ) -> Callable[P, ObservedCall[Any]]:
        """Turn a request builder into a call constructor.

        The builder receives the factory's client as its first argument.
        Markers set with @secured and @parse_with are honoured.

        Args:
            builder: Function returning an httpx.Request.

        Returns:
            Function with the builder's remaining signature that returns
            an ObservedCall.
        """
        secured = is_secured(builder)
        parse = get_parser(builder)

        @functools.wraps(builder)
        def make_call(*args: P.args, **kwargs: P.kwargs) -> ObservedCall[Any]:
            request = builder(self._client, *args, **kwargs)
            return self.create(request, secured=secured, parse=parse)

        return make_call
