"""Unit tests for testing utilities."""

from unittest.mock import MagicMock, Mock

from lattice_di.application.container import Container
from lattice_di.application.fakes import Fake
from lattice_di.domain import inject
from lattice_di.infrastructure.testing.utilities import FakeScope, create_fake_container


class EmailService:
    def send(self, address):
        raise RuntimeError("real email sent")


@inject(EmailService)
class UserService:
    def __init__(self, email):
        self.email = email

    def register(self, address):
        self.email.send(address)


class TestCreateFakeContainer:
    """Test cases for create_fake_container."""

    def test_create_fake_container_without_keys(self):
        """Test that an empty call yields a plain container."""
        container = create_fake_container()

        assert isinstance(container, Container)
        assert container.resolve(Container) is container

    def test_create_fake_container_fakes_keys(self):
        """Test that every given key resolves to a fake."""
        container = create_fake_container(EmailService, "mailer")

        assert isinstance(container.resolve(EmailService), Fake)
        assert isinstance(container.resolve("mailer"), Fake)

    def test_fakes_are_injected_into_dependents(self):
        """Test that dependents receive the fake."""
        container = create_fake_container(EmailService)

        container.resolve(UserService).register("user@example.com")

        container.resolve(EmailService).send.assert_called_once_with("user@example.com")

    def test_custom_fake_factory(self):
        """Test that the given factory creates the mocks."""
        container = create_fake_container("mailer", fake_factory=Mock)

        mock = container.resolve("mailer").send

        assert isinstance(mock, Mock)
        assert not isinstance(mock, MagicMock)


class TestFakeScope:
    """Test cases for FakeScope."""

    def test_fake_scope_yields_fork(self):
        """Test that the scope yields a child of the given container."""
        parent = Container()

        with FakeScope(parent) as scoped:
            assert scoped.parent is parent
            assert scoped is not parent

    def test_fake_scope_fakes_keys_in_fork_only(self):
        """Test that the parent keeps its real registrations."""
        parent = Container()
        parent.singleton(EmailService)

        with FakeScope(parent, EmailService) as scoped:
            assert isinstance(scoped.resolve(EmailService), Fake)
            assert isinstance(scoped.resolve(UserService).email, Fake)

        assert isinstance(parent.resolve(EmailService), EmailService)

    def test_fake_scope_exposes_fakes(self):
        """Test that the created fakes are available on the scope."""
        scope = FakeScope(Container(), EmailService)

        with scope as scoped:
            assert scope.fakes[EmailService] is scoped.resolve(EmailService)

        assert scope.fakes == {}

    def test_fake_scope_does_not_swallow_exceptions(self):
        """Test that errors raised inside the block propagate."""
        scope = FakeScope(Container())

        try:
            with scope:
                raise ValueError("boom")
        except ValueError as error:
            assert str(error) == "boom"
        else:
            raise AssertionError("ValueError was swallowed")
