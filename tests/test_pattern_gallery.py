"""Tests for the pattern demonstrations."""

import pytest

import cipher_engine
from pattern_gallery import (
    DEMO_REGISTRY,
    AirplaneTrip,
    App,
    Author,
    BikeTrip,
    CarTrip,
    CopyCommand,
    Button,
    EmailNotifier,
    File,
    Folder,
    ItalianPizzeria,
    MyPizzeria,
    Newsletter,
    Notifier,
    PizzaMaker,
    Reader,
    Shortcut,
    SMSNotifier,
    main,
    travel,
)


@pytest.fixture
def file_tree():
    root = Folder("MyFolder")
    root.add_component(File("file1.txt", 100))
    root.add_component(File("file2.txt", 200))
    sub = Folder("MySubFolder")
    sub.add_component(File("file3.txt", 300))
    root.add_component(sub)
    return root, sub


class TestComposite:
    """Test cases for the file system composite."""

    def test_file(self):
        f = File("file1.txt", 100)
        assert f.get_name() == "file1.txt"
        assert f.get_size() == 100
        assert f.tree() == "file1.txt (100 bytes)"

    def test_empty_folder(self):
        assert Folder("empty").get_size() == 0

    def test_sizes_roll_up(self, file_tree):
        root, sub = file_tree
        assert sub.get_size() == 300
        assert root.get_size() == 600

    def test_tree(self, file_tree):
        root, sub = file_tree
        assert sub.tree() == "- MySubFolder (Folder) (300 bytes)\n|  file3.txt (300 bytes)\n"
        assert root.tree() == (
            "- MyFolder (Folder) (600 bytes)\n"
            "|  file1.txt (100 bytes)\n"
            "|  file2.txt (200 bytes)\n"
            "|  - MySubFolder (Folder) (300 bytes)\n"
            "|  file3.txt (300 bytes)\n"
            "\n"
        )


class TestObserver:
    """Test cases for the newsletter observer."""

    def test_subscribers_notified_in_order(self):
        john, jane = Reader("John"), Reader("Jane")
        author = Author()
        author.newsletter.subscribe(john)
        author.newsletter.subscribe(jane)

        lines = author.write_article()

        assert lines == [
            "John received new article notification: #1",
            "Jane received new article notification: #1",
        ]

    def test_unsubscribe_stops_notifications(self):
        john, jane = Reader("John"), Reader("Jane")
        newsletter = Newsletter()
        newsletter.subscribe(john)
        newsletter.subscribe(jane)
        author = Author()
        author.newsletter = newsletter

        author.write_article()
        newsletter.unsubscribe(jane)
        author.write_article()

        assert john.received == ["#1", "#2"]
        assert jane.received == ["#1"]
        assert newsletter.published == ["#1", "#2"]

    def test_unsubscribe_unknown_listener_is_noop(self):
        newsletter = Newsletter()
        reader = Reader("John")
        newsletter.subscribe(reader)
        newsletter.unsubscribe(Reader("John"))
        assert newsletter.listeners == [reader]


class TestCommand:
    """Test cases for the editor commands."""

    def test_button_and_shortcut_share_command(self):
        command = CopyCommand()
        assert Button(command).click() == Shortcut(command).press() == "Copying text..."

    def test_app_run(self):
        assert App().run() == [
            "Copying text...", "Cutting text...", "Pasting text...",
            "Copying text...", "Cutting text...", "Pasting text...",
        ]


class TestTemplateMethod:
    """Test cases for the notifier template method."""

    def test_email_steps_in_order(self):
        notifier = EmailNotifier()
        assert notifier.notify("Alice", "alice@yourmail.com") is True
        assert notifier.log[0] == "Preparing notification for Alice"
        assert notifier.log[1] == (
            "Sending email to alice@yourmail.com with content: "
            "Hello, Alice! This is a notification just for you."
        )
        assert notifier.log[-2] == "Email sent successfully!"
        assert notifier.log[-1] == "Notification sent to Alice at alice@yourmail.com"

    def test_sms_uses_gateway(self):
        notifier = SMSNotifier()
        notifier.notify("Bob", "+1234567890")
        assert "Contacting SMS gateway..." in notifier.log

    @pytest.mark.parametrize("user,address", [("", "+1234567890"), ("Bob", ""), (None, None)])
    def test_requires_user_and_address(self, user, address):
        notifier = SMSNotifier()
        with pytest.raises(ValueError, match="User and address must be provided"):
            notifier.notify(user, address)
        assert notifier.log == []

    def test_cannot_instantiate_abstract_base(self):
        with pytest.raises(TypeError):
            Notifier()


class TestBuilder:
    """Test cases for the pizza builders."""

    def test_my_pizzeria(self):
        pizza, simple = PizzaMaker(MyPizzeria()).prepare_pizza()

        assert pizza.size == 30
        assert pizza.olives_amount == 16
        assert pizza.has_cheese and pizza.cheese_type == "mozzarella"
        assert pizza.has_pepperoni
        assert not pizza.has_onions

        # builder was reset by bake()
        assert simple.size == 0
        assert simple.olives_amount == 0
        assert simple.has_cheese
        assert not simple.has_pepperoni

    def test_italian_pizzeria(self):
        pizza = ItalianPizzeria().set_size(28).add_cheese().add_pepperoni() \
            .set_stuffed_crust("cheese").add_onions().bake()

        assert pizza.cheese_type == "parmesan"
        assert not pizza.has_pepperoni
        assert pizza.has_onions
        assert pizza.stuffed_crust == "No stuffed crust. Italians don't do stuffed crust."

    def test_bake_returns_independent_pizzas(self):
        builder = MyPizzeria()
        first = builder.set_size(20).set_stuffed_crust("cheese").bake()
        second = builder.bake()
        assert first.stuffed_crust == "cheese"
        assert second.stuffed_crust is None
        assert first is not second


class TestFactoryMethod:
    """Test cases for the vehicle factory method."""

    @pytest.mark.parametrize("trip,expected", [
        (CarTrip(), "Driving the car at a maximum speed of 150 km/h."),
        (BikeTrip(), "Riding the bike at a maximum speed of 30 km/h."),
        (AirplaneTrip(), "Taking off with the airplane at a maximum speed of 900 km/h."),
    ])
    def test_travel(self, trip, expected, capsys):
        assert travel(trip) == expected
        assert "Let's start the trip!" in capsys.readouterr().out

    def test_vehicles(self):
        car = CarTrip().vehicle_factory()
        bike = BikeTrip().vehicle_factory()
        plane = AirplaneTrip().vehicle_factory()
        assert (car.color, car.wheel_count, car.refuel()) == ("red", 4, "Refueling the car with gasoline.")
        assert bike.fuel_type is None
        assert bike.refuel() == "No refueling needed for a bike."
        assert plane.stop_engine() == "Stopping the airplane engines."


class TestGalleryCli:
    """Test cases for pattern_gallery.main()."""

    def test_strategy_demo(self, capsys):
        assert main(["strategy"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "",
            "=== strategy ===",
            "Khoor, Zruog!",
            "Hello, World!",
            "Rijvs, Uyvjn!",
            "Hello, World!",
            "---",
            "Dlgc mq k wcmvcd qccwyqi.",
            "Aidz jn h tzjsza nzztvnf.",
            "This is a secret message.",
        ]

    def test_runs_all_demos_by_default(self, capsys):
        main([])
        out = capsys.readouterr().out
        for name in DEMO_REGISTRY:
            assert f"=== {name} ===" in out

    def test_observer_demo_announces_each_article(self, capsys):
        main(["observer"])
        assert capsys.readouterr().out.splitlines()[2:] == [
            "Writing a new article...",
            "New article published: #1",
            "John received new article notification: #1",
            "Jane received new article notification: #1",
            "Jane unsubscribes from the newsletter",
            "Writing a new article...",
            "New article published: #2",
            "John received new article notification: #2",
        ]

    def test_composite_demo_reports_every_total(self, capsys):
        main(["composite"])
        out = capsys.readouterr().out
        for line in ("Total size of MyFolder: 600 bytes", "Total size of MySubFolder: 300 bytes",
                     "Total size of MyFile1: 100 bytes", "Total size of MyFile2: 200 bytes",
                     "Total size of MyFile3: 300 bytes"):
            assert line in out

    def test_list(self, capsys):
        main(["--list"])
        out = capsys.readouterr().out
        assert "Available Demos:" in out
        assert "template_method" in out

    def test_unknown_demo(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["singleton"])
        assert excinfo.value.code == 2

    def test_verbose_logs_strategy_switches(self, capsys):
        main(["-v", "strategy"])
        assert "[INFO] Switching strategy caesar -> vigenere" in capsys.readouterr().err
        assert cipher_engine.VERBOSE is True
