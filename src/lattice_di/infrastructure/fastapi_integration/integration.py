from typing import Any, Callable

from fastapi import Depends, FastAPI, Request

from lattice_di.domain import IContainer, TypeKey

APP_STATE_ATTRIBUTE = "di_container"


def create_fastapi_dependency(container: IContainer, type_key: TypeKey, *args: Any) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves from the container.

    The resolved value follows the container rules for ``type_key``
    (singleton, binding, resolver, fake), evaluated on every request.

    Args:
        container: The container to resolve from.
        type_key: The class or string name to resolve.
        *args: Explicit arguments forwarded to ``resolve``.

    Returns:
        A zero-argument callable that FastAPI can use with Depends().

    Example:
        >>> container = Container()
        >>> container.singleton(UserRepository)
        >>>
        >>> get_user_repo = create_fastapi_dependency(container, UserRepository)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the dependency from the container."""
        return container.resolve(type_key, *args)

    return dependency


def create_walk_dependency(
    container: IContainer,
    name: str,
    initial_factory: Callable[[], Any] = dict,
) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that walks a hook extension point.

    ``initial_factory`` is called on every request so that callbacks folding
    over the value never share state between requests.

    Args:
        container: The container owning the hooks.
        name: Extension point name.
        initial_factory: Builds the value passed to the first callback.

    Returns:
        A zero-argument callable returning the folded value.

    Example:
        >>> container.hook("app/features", lambda features: {**features, "search": True})
        >>> get_features = create_walk_dependency(container, "app/features")
        >>>
        >>> @app.get("/features")
        >>> def features(enabled: dict = Depends(get_features)):
        ...     return enabled
    """

    def dependency() -> Any:
        """Walk the extension point with a fresh initial value."""
        return container.walk(name, initial_factory())

    return dependency


def provide(container: IContainer, type_key: TypeKey, *args: Any) -> Any:
    """Shorthand for ``Depends(create_fastapi_dependency(container, type_key, *args))``.

    Example:
        >>> @app.get("/users")
        >>> def list_users(repo: UserRepository = provide(container, UserRepository)):
        ...     return repo.get_all()
    """
    return Depends(create_fastapi_dependency(container, type_key, *args))


def install_container(app: FastAPI, container: IContainer) -> None:
    """Attach ``container`` to ``app`` for use by ``create_app_dependency``.

    Example:
        >>> app = FastAPI()
        >>> install_container(app, container)
    """
    setattr(app.state, APP_STATE_ATTRIBUTE, container)


def create_app_dependency(type_key: TypeKey, *args: Any) -> Callable[[Request], Any]:
    """Create a dependency resolving from the container installed on the app.

    Useful when endpoints are declared in modules that cannot import the
    container itself.

    Args:
        type_key: The class or string name to resolve.
        *args: Explicit arguments forwarded to ``resolve``.

    Returns:
        A callable taking the current request.

    Raises:
        RuntimeError: When called for an app without an installed container.

    Example:
        >>> get_repo = create_app_dependency(UserRepository)
        >>>
        >>> @router.get("/users")
        >>> def list_users(repo: UserRepository = Depends(get_repo)):
        ...     return repo.get_all()
    """

    def app_dependency(request: Request) -> Any:
        """Resolve from the container installed on the request's app."""
        container = getattr(request.app.state, APP_STATE_ATTRIBUTE, None)
        if container is None:
            raise RuntimeError("Application has no DI container. Did you forget to call install_container()?")
        return container.resolve(type_key, *args)

    return app_dependency
