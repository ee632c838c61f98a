"""End-to-end integration tests for object graph resolution."""

import pytest

from lattice_di import Container, TypeNotFoundError, inject, injectable


class Settings:
    def __init__(self, dsn="sqlite://"):
        self.dsn = dsn


@injectable(singleton=True)
@inject(Settings)
class Database:
    def __init__(self, settings):
        self.settings = settings


class Repository:
    """Abstract repository, bound to a concrete class per application."""


@inject(Database)
class SqlRepository(Repository):
    def __init__(self, database):
        self.database = database


class InMemoryRepository(Repository):
    pass


@inject(Repository, "clock")
class UserService:
    def __init__(self, repository, clock):
        self.repository = repository
        self.clock = clock


class TestApplicationGraph:
    """Test a small application graph wired through the container."""

    @pytest.fixture
    def container(self):
        container = Container()
        container.instance(Settings, Settings("postgres://db"))
        container.bind(Repository, SqlRepository)
        container.resolver("clock", lambda: "12:00")
        return container

    def test_full_graph(self, container):
        """Test that the whole graph is built with the right strategies."""
        service = container.resolve(UserService)

        assert isinstance(service.repository, SqlRepository)
        assert service.repository.database.settings.dsn == "postgres://db"
        assert service.clock == "12:00"

    def test_flagged_database_is_shared(self, container):
        """Test that the flagged database singleton is reused across services."""
        first = container.resolve(UserService)
        second = container.resolve(UserService)

        assert first.repository is not second.repository
        assert first.repository.database is second.repository.database

    def test_fork_per_unit_of_work(self, container):
        """Test that forks share the database but can swap repositories."""
        container.resolve(Database)
        fork = container.fork()
        fork.bind(Repository, InMemoryRepository)
        fork.instance("clock", "13:00")

        parent_service = container.resolve(UserService)

        assert isinstance(fork.resolve(UserService).repository, InMemoryRepository)
        assert fork.resolve(Database) is parent_service.repository.database

    def test_missing_string_dependency(self):
        """Test that an unregistered string dependency fails the whole resolution."""
        container = Container()
        container.bind(Repository, InMemoryRepository)

        with pytest.raises(TypeNotFoundError, match="clock"):
            container.resolve(UserService)

    def test_explicit_arguments_skip_missing_dependencies(self):
        """Test that explicit arguments avoid resolving unknown keys."""
        repository = InMemoryRepository()

        service = Container().resolve(UserService, repository, "09:00")

        assert service.repository is repository
        assert service.clock == "09:00"


class TestExtensionPoints:
    """Test hooks used as an extension point between modules."""

    def test_modules_contribute_to_a_registry(self):
        """Test that several modules extend the same value."""
        container = Container()

        def register_users(routes):
            return {**routes, "/users": "users.list"}

        def register_health(routes):
            return {**routes, "/health": "health.check"}

        container.hook("app/routes", register_users)
        container.hook("app/routes", register_health)

        routes = container.walk("app/routes", {"/": "index"})

        assert routes == {"/": "index", "/users": "users.list", "/health": "health.check"}

    def test_hooks_can_resolve_from_the_container(self):
        """Test that callbacks can use the container they were registered on."""
        container = Container()
        container.instance("prefix", "v1")
        container.hook("app/prefixes", lambda prefixes: prefixes + [container.resolve("prefix")])

        assert container.walk("app/prefixes", []) == ["v1"]


class TestCycles:
    """Test the behavior of cyclic graphs."""

    def test_cyclic_graph_recurses_until_recursion_error(self):
        """Test that cycles are not detected and surface as RecursionError."""

        class Chicken:
            def __init__(self, egg):
                self.egg = egg

        @inject(Chicken)
        class Egg:
            def __init__(self, chicken):
                self.chicken = chicken

        inject(Egg)(Chicken)

        with pytest.raises(RecursionError):
            Container().resolve(Chicken)
