"""Unit tests for the SOLID principle examples."""

import pytest

from showcase.core.exceptions import DomainValidationError
from showcase.solid import DEMOS, dip, isp, lsp, ocp, srp


class TestSingleResponsibility:
    @pytest.fixture
    def collaborators(self):
        return (
            srp.UserValidator(),
            srp.UserRepository(),
            srp.EmailSender(),
            srp.ActivityLogger(),
        )

    def test_create_user_touches_each_collaborator(self, collaborators):
        validator, repository, sender, activity = collaborators
        service = srp.UserService(validator, repository, sender, activity)

        user = service.create_user("john@example.com", "secret123")

        assert repository.find("john@example.com") == user
        assert sender.sent == ["Welcome john@example.com"]
        assert activity.entries == ["User created: john@example.com"]

    @pytest.mark.parametrize(
        "email,password", [("not-an-email", "secret123"), ("a@b.c", "short")]
    )
    def test_validator_rejects_bad_input(self, collaborators, email, password):
        service = srp.UserService(*collaborators)
        with pytest.raises(DomainValidationError):
            service.create_user(email, password)
        assert collaborators[1].find(email) is None

    def test_bad_version_does_the_same_job_in_one_class(self):
        bad = srp.UserServiceBad()
        bad.create_user("john@example.com", "secret123")
        assert bad.sent and bad.log and "john@example.com" in bad.users


class TestOpenClosed:
    def test_new_notifier_needs_no_service_change(self):
        class SlackNotifier(ocp.Notifier):
            def send(self, message):
                return f"Slack: {message}"

        service = ocp.NotificationService([ocp.EmailNotifier(), SlackNotifier()])
        assert service.notify("hi") == ["Email: hi", "Slack: hi"]

    def test_bad_version_rejects_unknown_kind(self):
        with pytest.raises(ValueError):
            ocp.NotificationServiceBad().send("slack", "hi")


class TestLiskovSubstitution:
    def test_square_breaks_rectangle_contract(self):
        assert lsp.resize_to_5_by_4(lsp.Rectangle()) == 20
        assert lsp.resize_to_5_by_4(lsp.SquareBad()) == 16

    def test_shapes_are_substitutable(self):
        shapes = [lsp.RectangleShape(5, 4), lsp.SquareShape(5)]
        assert lsp.calculate_total_area(shapes) == 45


class TestInterfaceSegregation:
    def test_robot_forced_to_implement_eat(self):
        with pytest.raises(NotImplementedError):
            isp.RobotBad().eat()

    def test_clients_depend_on_small_interfaces(self):
        human = isp.Human("Alice")
        robot = isp.Robot("R2")

        assert isp.do_work(human) == "Alice working"
        assert isp.do_work(robot) == "robot R2 working"
        assert isp.feed_worker(human) == "Alice eating"
        assert not isinstance(robot, isp.Eater)


class TestDependencyInversion:
    @pytest.mark.parametrize(
        "processor,prefix",
        [
            (dip.StripeProcessor(), "Stripe"),
            (dip.PayPalProcessor(), "PayPal"),
            (dip.CryptoProcessor(), "Crypto"),
        ],
    )
    def test_order_service_uses_injected_processor(self, processor, prefix):
        assert dip.OrderService(processor).process_order(100) == f"{prefix} charged 100.00"

    def test_non_positive_amount_rejected(self):
        with pytest.raises(ValueError):
            dip.OrderService(dip.StripeProcessor()).process_order(0)


@pytest.mark.parametrize("name", sorted(DEMOS))
def test_demos_return_lines(name):
    lines = DEMOS[name]()
    assert lines and all(isinstance(line, str) for line in lines)
