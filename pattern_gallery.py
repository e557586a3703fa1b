import sys
import argparse
from abc import ABC, abstractmethod
from typing import List, Optional

import cipher_engine
from cipher_engine import CaesarCipher, VigenereCipher, TextCipher, log_info

# ==========================================
#  FRAMEWORK: Demo Registry
# ==========================================

DEMO_REGISTRY = {}

def register_demo(name: str, description: str):
    """Decorator to register a demo driver under a command-line name."""
    def decorator(func):
        func.demo_name = name
        func.description = description
        DEMO_REGISTRY[name] = func
        return func
    return decorator

# ==========================================
#  STRUCTURAL: Composite (file system)
# ==========================================

class FileSystemComponent(ABC):
    """Common interface for leaves and containers of a file tree."""

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_size(self) -> int:
        pass

    @abstractmethod
    def tree(self) -> str:
        pass


class File(FileSystemComponent):
    def __init__(self, name: str, size: int):
        self._name = name
        self._size = size

    def get_name(self) -> str:
        return self._name

    def get_size(self) -> int:
        return self._size

    def tree(self) -> str:
        return f"{self._name} ({self._size} bytes)"


class Folder(FileSystemComponent):
    """A folder's size is the sum of everything below it."""

    def __init__(self, name: str):
        self._name = name
        self._children: List[FileSystemComponent] = []

    def get_name(self) -> str:
        return self._name

    def get_size(self) -> int:
        return sum(child.get_size() for child in self._children)

    def add_component(self, component: FileSystemComponent) -> None:
        self._children.append(component)

    def tree(self) -> str:
        result = f"- {self._name} (Folder) ({self.get_size()} bytes)\n"
        for child in self._children:
            result += f"|  {child.tree()}\n"
        return result


@register_demo("composite", "Files and folders answer size and tree queries uniformly.")
def demo_composite():
    my_folder = Folder("MyFolder")
    files = [File("file1.txt", 100), File("file2.txt", 200), File("file3.txt", 300)]
    my_folder.add_component(files[0])
    my_folder.add_component(files[1])

    print(f"Folder name: {my_folder.get_name()}")
    print(f"Folder size: {my_folder.get_size()} bytes")
    for f in files:
        print(f"File name: {f.get_name()}")
        print(f"File size: {f.get_size()} bytes")

    sub_folder = Folder("MySubFolder")
    sub_folder.add_component(files[2])
    my_folder.add_component(sub_folder)

    print(f"Subfolder name: {sub_folder.get_name()}")
    print(f"Subfolder size: {sub_folder.get_size()} bytes")
    print(f"Total size of MyFolder: {my_folder.get_size()} bytes")
    print(f"Total size of MySubFolder: {sub_folder.get_size()} bytes")
    for i, f in enumerate(files, 1):
        print(f"Total size of MyFile{i}: {f.get_size()} bytes")
    print("Folder structure:")
    print(my_folder.tree())
    print("Subfolder structure:")
    print(sub_folder.tree())

# ==========================================
#  BEHAVIORAL: Observer (newsletter)
# ==========================================

class NewsletterListener(ABC):
    @abstractmethod
    def update(self, article: str):
        pass


class Newsletter:
    """Keeps subscribers in order and fans each article out to all of them."""

    def __init__(self):
        self.listeners: List[NewsletterListener] = []
        self.published: List[str] = []

    def subscribe(self, listener: NewsletterListener) -> None:
        self.listeners.append(listener)

    def unsubscribe(self, listener: NewsletterListener) -> None:
        self.listeners = [existing for existing in self.listeners if existing is not listener]

    def notify(self, article: str) -> List[str]:
        self.published.append(article)
        return [listener.update(article) for listener in self.listeners]


class Author:
    def __init__(self):
        self.newsletter = Newsletter()
        self._article_count = 0

    def write_article(self) -> List[str]:
        self._article_count += 1
        return self.newsletter.notify(f"#{self._article_count}")


class Reader(NewsletterListener):
    def __init__(self, name: str):
        self.name = name
        self.received: List[str] = []

    def update(self, article: str) -> str:
        self.received.append(article)
        return f"{self.name} received new article notification: {article}"


def _publish(author: Author):
    print("Writing a new article...")
    lines = author.write_article()
    print(f"New article published: {author.newsletter.published[-1]}")
    for line in lines:
        print(line)


@register_demo("observer", "Readers get notified of every article while subscribed.")
def demo_observer():
    john, jane = Reader("John"), Reader("Jane")
    newsletter = Newsletter()
    newsletter.subscribe(john)
    newsletter.subscribe(jane)

    author = Author()
    author.newsletter = newsletter
    _publish(author)

    print("Jane unsubscribes from the newsletter")
    newsletter.unsubscribe(jane)
    _publish(author)

# ==========================================
#  BEHAVIORAL: Command (editor actions)
# ==========================================

class Command(ABC):
    @abstractmethod
    def execute(self) -> str:
        pass


class CopyCommand(Command):
    def execute(self) -> str:
        return "Copying text..."


class CutCommand(Command):
    def execute(self) -> str:
        return "Cutting text..."


class PasteCommand(Command):
    def execute(self) -> str:
        return "Pasting text..."


class Button:
    def __init__(self, command: Command):
        self.command = command

    def click(self) -> str:
        return self.command.execute()


class Shortcut:
    def __init__(self, command: Command):
        self.command = command

    def press(self) -> str:
        return self.command.execute()


class App:
    """Wires one command instance to both a button and a shortcut."""

    def __init__(self):
        copy, cut, paste = CopyCommand(), CutCommand(), PasteCommand()
        self.buttons = [Button(copy), Button(cut), Button(paste)]
        self.shortcuts = [Shortcut(copy), Shortcut(cut), Shortcut(paste)]

    def run(self) -> List[str]:
        return [b.click() for b in self.buttons] + [s.press() for s in self.shortcuts]


@register_demo("command", "Buttons and shortcuts trigger the same command objects.")
def demo_command():
    for line in App().run():
        print(line)

# ==========================================
#  BEHAVIORAL: Template Method (notifiers)
# ==========================================

class Notifier(ABC):
    """
    notify() fixes the order of steps: validate, prepare, send.

    Subclasses only supply send(); prepare() may be overridden.
    """

    def __init__(self):
        self.log: List[str] = []

    def notify(self, user: str, address: str) -> bool:
        if not user or not address:
            raise ValueError("User and address must be provided")
        content = self.prepare(user)
        self.send(content, address)
        self.log.append(f"Notification sent to {user} at {address}")
        return True

    def prepare(self, user: str) -> str:
        self.log.append(f"Preparing notification for {user}")
        return f"Hello, {user}! This is a notification just for you."

    @abstractmethod
    def send(self, content: str, address: str) -> None:
        pass


class EmailNotifier(Notifier):
    def send(self, content: str, address: str) -> None:
        self.log.extend([
            f"Sending email to {address} with content: {content}",
            "Building email template...",
            "Queuing email for delivery...",
            "Contacting SMTP server...",
            "Email sent successfully!",
        ])


class SMSNotifier(Notifier):
    def send(self, content: str, address: str) -> None:
        self.log.extend([
            f"Sending SMS to {address} with content: {content}",
            "Building SMS template...",
            "Queuing SMS for delivery...",
            "Contacting SMS gateway...",
            "SMS sent successfully!",
        ])


@register_demo("template_method", "Email and SMS share one notify() skeleton.")
def demo_template_method():
    runs = [(EmailNotifier(), "Alice", "alice@yourmail.com"),
            (SMSNotifier(), "Bob", "+1234567890"),
            (SMSNotifier(), "Alice", "+0987654321")]
    for i, (notifier, user, address) in enumerate(runs):
        if i:
            print("---")
        notifier.notify(user, address)
        for line in notifier.log:
            print(line)

# ==========================================
#  CREATIONAL: Builder (pizza)
# ==========================================

class Pizza:
    def __init__(self, size: int):
        self.size = size
        self.olives_amount = 0
        self.has_cheese = False
        self.cheese_type: Optional[str] = None
        self.has_pepperoni = False
        self.has_onions = False
        self.stuffed_crust: Optional[str] = None

    def __repr__(self):
        return (f"Pizza(size={self.size}, olives_amount={self.olives_amount}, "
                f"has_cheese={self.has_cheese}, cheese_type={self.cheese_type!r}, "
                f"has_pepperoni={self.has_pepperoni}, has_onions={self.has_onions}, "
                f"stuffed_crust={self.stuffed_crust!r})")


class PizzaBuilder(ABC):
    """Fluent builder. bake() hands over the pizza and starts a fresh one."""

    CHEESE = None

    def __init__(self):
        self.reset()

    def reset(self) -> "PizzaBuilder":
        self.pizza = Pizza(0)
        self.pizza_size = 0
        return self

    def set_size(self, size: int) -> "PizzaBuilder":
        self.pizza_size = size
        return self

    def set_olives_amount(self, amount: int) -> "PizzaBuilder":
        self.pizza.olives_amount = amount
        return self

    def add_cheese(self) -> "PizzaBuilder":
        self.pizza.has_cheese = True
        self.pizza.cheese_type = self.CHEESE
        return self

    def add_onions(self) -> "PizzaBuilder":
        self.pizza.has_onions = True
        return self

    @abstractmethod
    def add_pepperoni(self) -> "PizzaBuilder":
        pass

    @abstractmethod
    def set_stuffed_crust(self, stuffed_crust: str) -> "PizzaBuilder":
        pass

    def bake(self) -> Pizza:
        baked = Pizza(self.pizza_size)
        for field in ("olives_amount", "has_cheese", "cheese_type",
                      "has_pepperoni", "has_onions", "stuffed_crust"):
            setattr(baked, field, getattr(self.pizza, field))
        self.reset()
        return baked


class MyPizzeria(PizzaBuilder):
    CHEESE = "mozzarella"

    def add_pepperoni(self):
        self.pizza.has_pepperoni = True
        return self

    def set_stuffed_crust(self, stuffed_crust):
        self.pizza.stuffed_crust = stuffed_crust
        return self


class ItalianPizzeria(PizzaBuilder):
    CHEESE = "parmesan"

    def add_pepperoni(self):
        # never on an Italian pizza
        self.pizza.has_pepperoni = False
        return self

    def set_stuffed_crust(self, stuffed_crust):
        self.pizza.stuffed_crust = "No stuffed crust. Italians don't do stuffed crust."
        return self


class PizzaMaker:
    def __init__(self, builder: PizzaBuilder = None):
        self.builder = builder or MyPizzeria()

    def prepare_pizza(self, with_pepperoni: bool = True, with_onions: bool = False) -> List[Pizza]:
        self.builder.set_size(30).add_cheese().set_olives_amount(16)
        if with_pepperoni:
            self.builder.add_pepperoni()
        if with_onions:
            self.builder.add_onions()
        pizza = self.builder.bake()
        simple_pizza = self.builder.add_cheese().bake()
        return [pizza, simple_pizza]


@register_demo("builder", "Two pizzerias build pizzas through the same fluent interface.")
def demo_builder():
    for builder in (MyPizzeria(), ItalianPizzeria()):
        print(f"{type(builder).__name__}:")
        for pizza in PizzaMaker(builder).prepare_pizza():
            print(f"  {pizza!r}")

# ==========================================
#  CREATIONAL: Factory Method (vehicles)
# ==========================================

class Vehicle(ABC):
    def __init__(self, color: str, max_speed: int, wheel_count: int, fuel_type: Optional[str] = None):
        self.color = color
        self.max_speed = max_speed
        self.wheel_count = wheel_count
        self.fuel_type = fuel_type

    @abstractmethod
    def refuel(self) -> str:
        pass

    @abstractmethod
    def start_engine(self) -> str:
        pass

    @abstractmethod
    def drive(self) -> str:
        pass

    @abstractmethod
    def stop_engine(self) -> str:
        pass


class Car(Vehicle):
    def refuel(self):
        return f"Refueling the car with {self.fuel_type}."

    def start_engine(self):
        return "Starting the car engine."

    def drive(self):
        return f"Driving the car at a maximum speed of {self.max_speed} km/h."

    def stop_engine(self):
        return "Stopping the car engine."


class Bike(Vehicle):
    def refuel(self):
        return "No refueling needed for a bike."

    def start_engine(self):
        return "Starting the bike engine."

    def drive(self):
        return f"Riding the bike at a maximum speed of {self.max_speed} km/h."

    def stop_engine(self):
        return "Stopping the bike engine."


class Airplane(Vehicle):
    def refuel(self):
        return f"Refueling the airplane with {self.fuel_type}."

    def start_engine(self):
        return "Starting the airplane engines."

    def drive(self):
        return f"Taking off with the airplane at a maximum speed of {self.max_speed} km/h."

    def stop_engine(self):
        return "Stopping the airplane engines."


class VehicleTrip(ABC):
    @abstractmethod
    def vehicle_factory(self) -> Vehicle:
        pass

    def drive_vehicle(self) -> str:
        vehicle = self.vehicle_factory()
        log_info(vehicle.refuel())
        log_info(vehicle.start_engine())
        return vehicle.drive()


class CarTrip(VehicleTrip):
    def vehicle_factory(self):
        return Car("red", 150, 4, "gasoline")


class BikeTrip(VehicleTrip):
    def vehicle_factory(self):
        return Bike("blue", 30, 2)


class AirplaneTrip(VehicleTrip):
    def vehicle_factory(self):
        return Airplane("white", 900, 3, "jet fuel")


def travel(trip: VehicleTrip) -> str:
    print("Let's start the trip! I just don't know which vehicle we will use.")
    return trip.drive_vehicle()


@register_demo("factory", "Trips pick their vehicle through a factory method.")
def demo_factory():
    for trip in (CarTrip(), BikeTrip(), AirplaneTrip()):
        print(travel(trip))

# ==========================================
#  BEHAVIORAL: Strategy (ciphers)
# ==========================================

@register_demo("strategy", "One TextCipher, swappable Caesar and Vigenere strategies.")
def demo_strategy():
    caesar = CaesarCipher(3)
    vigenere = VigenereCipher("KEY")
    text_cipher = TextCipher(caesar)

    encrypted = text_cipher.encrypt("Hello, World!")
    print(encrypted)
    print(text_cipher.decrypt(encrypted))

    text_cipher.set_strategy(vigenere)
    encrypted = text_cipher.encrypt("Hello, World!")
    print(encrypted)
    print(text_cipher.decrypt(encrypted))

    print("---")
    encrypted = text_cipher.encrypt("This is a secret message.")
    print(encrypted)

    # Wrong strategy on purpose: Caesar cannot undo Vigenere
    text_cipher.set_strategy(caesar)
    garbled = text_cipher.decrypt(encrypted)
    print(garbled)

    restored = text_cipher.encrypt(garbled)
    text_cipher.set_strategy(vigenere)
    print(text_cipher.decrypt(restored))

# ==========================================
#  CLI LOGIC
# ==========================================

def list_demos():
    print("\nAvailable Demos:")
    print("=" * 60)
    for name, func in DEMO_REGISTRY.items():
        print(f"  {name:<16} {func.description}")
    print("=" * 60)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="pattern-gallery",
        description="Runs the design pattern demonstrations"
    )
    parser.add_argument("demos", nargs="*", metavar="DEMO",
                        help=f"Demos to run (default: all). One of: {', '.join(DEMO_REGISTRY)}")
    parser.add_argument("-l", "--list", action="store_true", help="List all available demos")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")
    args = parser.parse_args(argv)

    unknown = [name for name in args.demos if name not in DEMO_REGISTRY]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}")

    cipher_engine.VERBOSE = args.verbose

    if args.list:
        list_demos()
        return 0

    for name in args.demos or list(DEMO_REGISTRY):
        print(f"\n=== {name} ===")
        DEMO_REGISTRY[name]()
    return 0

if __name__ == "__main__":
    sys.exit(main())
