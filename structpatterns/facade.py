"""Facade pattern: one simple interface in front of a complex subsystem."""

from __future__ import annotations


def _fmt(value: float) -> str:
    return f"{value:g}"


def _emit(line: str) -> str:
    print(line)
    return line


# ----- Home theater -----


class DVDPlayer:
    """A disc player that tracks power, disc and playback state."""

    def __init__(self) -> None:
        self.powered = False
        self.current_movie: str | None = None
        self.disc_loaded = False

    def on(self) -> str:
        self.powered = True
        return _emit("DVD Player: Turning ON")

    def off(self) -> str:
        self.powered = False
        return _emit("DVD Player: Turning OFF")

    def play(self, movie: str) -> str:
        self.disc_loaded = True
        self.current_movie = movie
        return _emit(f"DVD Player: Playing '{movie}'")

    def stop(self) -> str:
        self.current_movie = None
        return _emit("DVD Player: Stopping playback")

    def eject(self) -> str:
        self.disc_loaded = False
        self.current_movie = None
        return _emit("DVD Player: Ejecting disc")


class Amplifier:
    """An amplifier that tracks power, volume and surround mode."""

    def __init__(self) -> None:
        self.powered = False
        self.volume = 0
        self.surround = False

    def on(self) -> str:
        self.powered = True
        return _emit("Amplifier: Turning ON")

    def off(self) -> str:
        self.powered = False
        return _emit("Amplifier: Turning OFF")

    def set_volume(self, level: int) -> str:
        self.volume = level
        return _emit(f"Amplifier: Setting volume to {level}")

    def set_surround_sound(self) -> str:
        self.surround = True
        return _emit("Amplifier: Enabling surround sound")


class Projector:
    """A projector that tracks power and wide screen mode."""

    def __init__(self) -> None:
        self.powered = False
        self.wide_screen = False

    def on(self) -> str:
        self.powered = True
        return _emit("Projector: Turning ON")

    def off(self) -> str:
        self.powered = False
        return _emit("Projector: Turning OFF")

    def wide_screen_mode(self) -> str:
        self.wide_screen = True
        return _emit("Projector: Setting wide screen mode")


class Lights:
    """Room lights with a brightness level in percent."""

    def __init__(self) -> None:
        self.level = 100

    def dim(self, level: int) -> str:
        self.level = level
        return _emit(f"Lights: Dimming to {level}%")

    def on(self) -> str:
        self.level = 100
        return _emit("Lights: Turning ON (100%)")


class Screen:
    """A projection screen that is either lowered or raised."""

    def __init__(self) -> None:
        self.lowered = False

    def down(self) -> str:
        self.lowered = True
        return _emit("Screen: Moving down")

    def up(self) -> str:
        self.lowered = False
        return _emit("Screen: Moving up")


class PopcornMaker:
    """A popcorn maker that counts the batches it pops."""

    def __init__(self) -> None:
        self.powered = False
        self.batches = 0

    def on(self) -> str:
        self.powered = True
        return _emit("Popcorn Maker: Turning ON")

    def off(self) -> str:
        self.powered = False
        return _emit("Popcorn Maker: Turning OFF")

    def pop(self) -> str:
        self.batches += 1
        return _emit("Popcorn Maker: Popping popcorn!")


class HomeTheaterFacade:
    """Starts and stops every home theater component in the right order."""

    def __init__(self) -> None:
        self.dvd = DVDPlayer()
        self.amp = Amplifier()
        self.projector = Projector()
        self.lights = Lights()
        self.screen = Screen()
        self.popcorn = PopcornMaker()

    def watch_movie(self, movie: str) -> None:
        print(f"\n=== Getting ready to watch '{movie}' ===")
        self.popcorn.on()
        self.popcorn.pop()
        self.lights.dim(10)
        self.screen.down()
        self.projector.on()
        self.projector.wide_screen_mode()
        self.amp.on()
        self.amp.set_surround_sound()
        self.amp.set_volume(5)
        self.dvd.on()
        self.dvd.play(movie)
        print("=== Enjoy your movie! ===")

    def end_movie(self) -> None:
        print("\n=== Shutting down home theater ===")
        self.popcorn.off()
        self.lights.on()
        self.screen.up()
        self.projector.off()
        self.amp.off()
        self.dvd.stop()
        self.dvd.eject()
        self.dvd.off()
        print("=== Movie time is over ===")


# ----- Computer -----


class CPU:
    def freeze(self) -> None:
        print("CPU: Freezing...")

    def jump(self, position: int) -> None:
        print(f"CPU: Jumping to position {position}")

    def execute(self) -> None:
        print("CPU: Executing...")


class Memory:
    def load(self, position: int, data: str) -> None:
        print(f"Memory: Loading data at position {position}")


class HardDrive:
    def read(self, lba: int, size: int) -> str:
        print(f"HardDrive: Reading {size} bytes from sector {lba}")
        return "boot_data"


class ComputerFacade:
    """Boots the computer through its CPU, memory and disk."""

    def __init__(self) -> None:
        self.cpu = CPU()
        self.memory = Memory()
        self.hard_drive = HardDrive()

    def start(self) -> None:
        print("\n=== Starting Computer ===")
        self.cpu.freeze()
        boot_data = self.hard_drive.read(0, 1024)
        self.memory.load(0, boot_data)
        self.cpu.jump(0)
        self.cpu.execute()
        print("=== Computer started successfully ===")


# ----- Online shopping -----


class Inventory:
    def check_availability(self, product: str) -> bool:
        print(f"Inventory: Checking availability of {product}")
        return True

    def reserve(self, product: str) -> None:
        print(f"Inventory: Reserving {product}")


class PaymentProcessor:
    def process_payment(self, amount: float) -> bool:
        print(f"Payment: Processing payment of ${_fmt(amount)}")
        return True


class ShippingService:
    def ship_product(self, product: str, address: str) -> None:
        print(f"Shipping: Shipping {product} to {address}")


class NotificationService:
    def send_confirmation(self, email: str) -> None:
        print(f"Notification: Sending confirmation email to {email}")


class OnlineShoppingFacade:
    """Runs stock, payment, shipping and notification for one order."""

    def __init__(self) -> None:
        self.inventory = Inventory()
        self.payment = PaymentProcessor()
        self.shipping = ShippingService()
        self.notification = NotificationService()

    def place_order(self, product: str, price: float, address: str, email: str) -> bool:
        print("\n=== Processing Order ===")
        if not self.inventory.check_availability(product):
            print("Order failed: Product not available")
            return False
        if not self.payment.process_payment(price):
            print("Order failed: Payment declined")
            return False
        self.inventory.reserve(product)
        self.shipping.ship_product(product, address)
        self.notification.send_confirmation(email)
        print("=== Order completed successfully! ===")
        return True


# ----- Banking -----


class Account:
    def has_enough_balance(self, amount: float) -> bool:
        print(f"Account: Checking balance for ${_fmt(amount)}")
        return True

    def debit(self, amount: float) -> None:
        print(f"Account: Debiting ${_fmt(amount)}")


class SecurityCheck:
    def authenticate(self, pin: str) -> bool:
        print("Security: Authenticating PIN")
        return pin == "1234"


class TransactionLog:
    def log(self, transaction: str) -> None:
        print(f"Log: Recording - {transaction}")


class BankingFacade:
    """Authenticates, checks funds, debits and logs a withdrawal."""

    def __init__(self) -> None:
        self.account = Account()
        self.security = SecurityCheck()
        self.transaction_log = TransactionLog()

    def withdraw(self, amount: float, pin: str) -> bool:
        print("\n=== Processing Withdrawal ===")
        if not self.security.authenticate(pin):
            print("Withdrawal failed: Invalid PIN")
            return False
        if not self.account.has_enough_balance(amount):
            print("Withdrawal failed: Insufficient funds")
            return False
        self.account.debit(amount)
        self.transaction_log.log(f"Withdrew ${amount:f}")
        print("=== Withdrawal successful! ===")
        return True


def main(argv: list[str] | None = None) -> int:
    """Run the facade demonstration."""
    print("=== FACADE PATTERN DEMO ===")

    print("\n1. HOME THEATER SYSTEM:")
    print("=======================")
    home_theater = HomeTheaterFacade()
    home_theater.watch_movie("Inception")
    home_theater.end_movie()

    print("\n\n2. COMPUTER SYSTEM:")
    print("===================")
    ComputerFacade().start()

    print("\n\n3. ONLINE SHOPPING:")
    print("===================")
    OnlineShoppingFacade().place_order(
        "Laptop", 999.99, "123 Main St", "customer@example.com"
    )

    print("\n\n4. BANKING SYSTEM:")
    print("==================")
    BankingFacade().withdraw(100.0, "1234")

    print("\n\n=== KEY TAKEAWAYS ===")
    print("1. Facade provides SIMPLIFIED interface to complex subsystem")
    print("2. Hides complexity from clients")
    print("3. Coordinates multiple subsystem components")
    print("4. Clients interact only with facade, not subsystem directly")
    print("5. Makes subsystem easier to use and understand")
    print("6. Promotes loose coupling between clients and subsystems")
    print("7. Common pattern in real-world applications and libraries")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())