"""Adapter pattern: making incompatible interfaces work together."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _emit(line: str) -> str:
    print(line)
    return line


def _fmt(value: float) -> str:
    return f"{value:g}"


# ----- Media player -----


class MediaPlayer(ABC):
    """Interface that clients use to play media."""

    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> str:
        """Play a file of the given type and return the line reported."""


class AdvancedMP3Player:
    def play_mp3(self, file_name: str) -> str:
        return _emit(f"Playing MP3 file: {file_name}")


class AdvancedMP4Player:
    def play_mp4(self, file_name: str) -> str:
        return _emit(f"Playing MP4 file: {file_name}")


class AdvancedVLCPlayer:
    def play_vlc(self, file_name: str) -> str:
        return _emit(f"Playing VLC file: {file_name}")


class MediaAdapter(MediaPlayer):
    """Routes media types to the advanced players' own methods."""

    def __init__(self) -> None:
        self._mp3 = AdvancedMP3Player()
        self._mp4 = AdvancedMP4Player()
        self._vlc = AdvancedVLCPlayer()
        self._handlers = {
            "mp3": self._mp3.play_mp3,
            "mp4": self._mp4.play_mp4,
            "vlc": self._vlc.play_vlc,
        }

    def play(self, audio_type: str, file_name: str) -> str:
        handler = self._handlers.get(audio_type)
        if handler is None:
            return _emit(f"Invalid media type: {audio_type}")
        return handler(file_name)


class AudioPlayer(MediaPlayer):
    """Plays MP3 natively and uses an adapter for MP4 and VLC."""

    def __init__(self) -> None:
        self._adapter = MediaAdapter()

    def play(self, audio_type: str, file_name: str) -> str:
        if audio_type == "mp3":
            return _emit(f"Playing MP3 file (native): {file_name}")
        if audio_type in ("mp4", "vlc"):
            return self._adapter.play(audio_type, file_name)
        return _emit(f"Invalid media type: {audio_type}")


# ----- Shape drawing -----


class LegacyRectangle:
    """Draws a rectangle from two corner points."""

    def draw(self, x1: int, y1: int, x2: int, y2: int) -> str:
        return _emit(f"Drawing Legacy Rectangle from ({x1},{y1}) to ({x2},{y2})")


class Shape(ABC):
    @abstractmethod
    def draw(self, x: int, y: int, width: int, height: int) -> str:
        """Draw the shape at a position with a size."""


class RectangleAdapter(Shape):
    """Converts position and size into the legacy corner-point call."""

    def __init__(self) -> None:
        self._legacy = LegacyRectangle()

    def draw(self, x: int, y: int, width: int, height: int) -> str:
        _emit("Adapter converting coordinates...")
        return self._legacy.draw(x, y, x + width, y + height)


# ----- Payments -----


class PayPalPayment:
    def send_payment_via_paypal(self, email: str, amount: float) -> str:
        return _emit(f"Processing ${_fmt(amount)} payment to {email} via PayPal")


class StripePayment:
    def process_stripe_payment(self, token: str, amount: float) -> str:
        return _emit(
            f"Processing ${_fmt(amount)} payment with token {token} via Stripe"
        )


class PaymentProcessor(ABC):
    @abstractmethod
    def process_payment(self, identifier: str, amount: float) -> str:
        """Charge an amount to the party named by the identifier."""


class PayPalAdapter(PaymentProcessor):
    def __init__(self) -> None:
        self._paypal = PayPalPayment()

    def process_payment(self, identifier: str, amount: float) -> str:
        return self._paypal.send_payment_via_paypal(identifier, amount)


class StripeAdapter(PaymentProcessor):
    def __init__(self) -> None:
        self._stripe = StripePayment()

    def process_payment(self, identifier: str, amount: float) -> str:
        return self._stripe.process_stripe_payment(identifier, amount)


# ----- Temperature -----


class CelsiusSensor:
    """A sensor reporting in degrees Celsius."""

    def __init__(self, celsius: float = 25.0) -> None:
        self.celsius = celsius

    def read_celsius(self) -> float:
        return self.celsius


class TemperatureSensor(ABC):
    @abstractmethod
    def read_fahrenheit(self) -> float:
        """Return the temperature in degrees Fahrenheit."""


class CelsiusToFahrenheitAdapter(TemperatureSensor):
    """Presents a Celsius sensor as a Fahrenheit one."""

    def __init__(self, sensor: CelsiusSensor | None = None) -> None:
        self._sensor = sensor if sensor is not None else CelsiusSensor()

    def read_fahrenheit(self) -> float:
        celsius = self._sensor.read_celsius()
        return celsius * 9.0 / 5.0 + 32.0


def main(argv: list[str] | None = None) -> int:
    """Run the adapter demonstration."""
    print("=== ADAPTER PATTERN DEMO ===")

    print("\n1. MEDIA PLAYER ADAPTER:")
    print("========================")
    player = AudioPlayer()
    player.play("mp3", "song.mp3")
    player.play("mp4", "video.mp4")
    player.play("vlc", "movie.vlc")
    player.play("avi", "video.avi")

    print("\n2. SHAPE DRAWING ADAPTER:")
    print("=========================")
    rect: Shape = RectangleAdapter()
    rect.draw(10, 20, 100, 50)

    print("\n3. PAYMENT PROCESSOR ADAPTER:")
    print("=============================")
    PayPalAdapter().process_payment("customer@example.com", 99.99)
    StripeAdapter().process_payment("tok_visa_1234", 149.99)

    print("\n4. TEMPERATURE SENSOR ADAPTER:")
    print("==============================")
    sensor: TemperatureSensor = CelsiusToFahrenheitAdapter()
    print(f"Temperature: {_fmt(sensor.read_fahrenheit())}°F")

    print("\n\n=== KEY TAKEAWAYS ===")
    print("1. Adapter makes incompatible interfaces work together")
    print("2. Converts one interface to another that clients expect")
    print("3. Useful for integrating third-party libraries or legacy code")
    print("4. Two types: Object Adapter (composition) and Class Adapter (inheritance)")
    print("5. Object Adapter is more flexible (used in most examples)")
    print("6. Client remains unaware of adaptation happening")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())