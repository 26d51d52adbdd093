"""Bridge pattern: abstractions and implementations that vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _fmt(value: float) -> str:
    return f"{value:g}"


# ----- Devices and remotes -----


class Device(ABC):
    """A controllable device holding power, volume and channel state."""

    def __init__(self, volume: int, channel: int) -> None:
        self.on = False
        self.volume = volume
        self.channel = channel

    @abstractmethod
    def turn_on(self) -> None:
        """Switch the device on."""

    @abstractmethod
    def turn_off(self) -> None:
        """Switch the device off."""

    @abstractmethod
    def set_volume(self, volume: int) -> None:
        """Set the volume."""

    @abstractmethod
    def set_channel(self, channel: int) -> None:
        """Set the channel."""


class TV(Device):
    def __init__(self) -> None:
        super().__init__(volume=30, channel=1)

    def turn_on(self) -> None:
        self.on = True
        print("TV: Turning ON")

    def turn_off(self) -> None:
        self.on = False
        print("TV: Turning OFF")

    def set_volume(self, volume: int) -> None:
        self.volume = volume
        print(f"TV: Setting volume to {self.volume}")

    def set_channel(self, channel: int) -> None:
        self.channel = channel
        print(f"TV: Setting channel to {self.channel}")


class Radio(Device):
    def __init__(self) -> None:
        super().__init__(volume=20, channel=88)

    def turn_on(self) -> None:
        self.on = True
        print("Radio: Turning ON")

    def turn_off(self) -> None:
        self.on = False
        print("Radio: Turning OFF")

    def set_volume(self, volume: int) -> None:
        self.volume = volume
        print(f"Radio: Setting volume to {self.volume}")

    def set_channel(self, channel: int) -> None:
        self.channel = channel
        print(f"Radio: Setting frequency to {self.channel} FM")


class RemoteControl:
    """Basic remote that drives any device."""

    def __init__(self, device: Device) -> None:
        self.device = device

    def toggle_power(self) -> None:
        print("Remote: Toggling power")
        self.device.turn_on()

    def volume_up(self) -> None:
        self.device.set_volume(self.device.volume + 10)

    def volume_down(self) -> None:
        self.device.set_volume(self.device.volume - 10)

    def channel_up(self) -> None:
        self.device.set_channel(self.device.channel + 1)

    def channel_down(self) -> None:
        self.device.set_channel(self.device.channel - 1)


class AdvancedRemote(RemoteControl):
    """Remote with muting and direct channel entry."""

    def mute(self) -> None:
        print("Remote: Muting device")
        self.device.set_volume(0)

    def set_channel_direct(self, channel: int) -> None:
        print("Remote: Setting channel directly")
        self.device.set_channel(channel)


# ----- Shapes and renderers -----


class Renderer(ABC):
    @abstractmethod
    def render_circle(self, radius: float) -> str:
        """Render a circle and return the line reported."""

    @abstractmethod
    def render_square(self, side: float) -> str:
        """Render a square and return the line reported."""


class VectorRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        line = f"Drawing circle with radius {_fmt(radius)} as VECTORS"
        print(line)
        return line

    def render_square(self, side: float) -> str:
        line = f"Drawing square with side {_fmt(side)} as VECTORS"
        print(line)
        return line


class RasterRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        line = f"Drawing circle with radius {_fmt(radius)} as PIXELS"
        print(line)
        return line

    def render_square(self, side: float) -> str:
        line = f"Drawing square with side {_fmt(side)} as PIXELS"
        print(line)
        return line


class Shape(ABC):
    """A shape drawn through a renderer."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    @abstractmethod
    def draw(self) -> str:
        """Draw the shape with its renderer."""

    @abstractmethod
    def resize(self, factor: float) -> None:
        """Scale the shape by a factor."""


class Circle(Shape):
    def __init__(self, renderer: Renderer, radius: float) -> None:
        super().__init__(renderer)
        self.radius = radius

    def draw(self) -> str:
        return self.renderer.render_circle(self.radius)

    def resize(self, factor: float) -> None:
        self.radius *= factor
        print(f"Circle resized to radius {_fmt(self.radius)}")


class Square(Shape):
    def __init__(self, renderer: Renderer, side: float) -> None:
        super().__init__(renderer)
        self.side = side

    def draw(self) -> str:
        return self.renderer.render_square(self.side)

    def resize(self, factor: float) -> None:
        self.side *= factor
        print(f"Square resized to side {_fmt(self.side)}")


# ----- Messages and senders -----


class MessageSender(ABC):
    @abstractmethod
    def send_message(self, message: str) -> str:
        """Send a message and return the line reported."""


class EmailSender(MessageSender):
    def send_message(self, message: str) -> str:
        line = f"Sending Email: {message}"
        print(line)
        return line


class SMSSender(MessageSender):
    def send_message(self, message: str) -> str:
        line = f"Sending SMS: {message}"
        print(line)
        return line


class PushNotificationSender(MessageSender):
    def send_message(self, message: str) -> str:
        line = f"Sending Push Notification: {message}"
        print(line)
        return line


class Message(ABC):
    """A message delivered through a sender."""

    def __init__(self, sender: MessageSender, content: str = "") -> None:
        self.sender = sender
        self.content = content

    @abstractmethod
    def send(self) -> str:
        """Deliver the message and return the full line reported."""

    def _deliver(self, label: str) -> str:
        prefix = f"[{label}] "
        print(prefix, end="")
        return prefix + self.sender.send_message(self.content)


class TextMessage(Message):
    def __init__(self, sender: MessageSender, text: str) -> None:
        super().__init__(sender, text)

    def send(self) -> str:
        return self._deliver("Text Message")


class UrgentMessage(Message):
    def __init__(self, sender: MessageSender, text: str) -> None:
        super().__init__(sender, "URGENT: " + text)

    def send(self) -> str:
        return self._deliver("Urgent Message")


def main(argv: list[str] | None = None) -> int:
    """Run the bridge demonstration."""
    print("=== BRIDGE PATTERN DEMO ===")

    print("\n1. REMOTE CONTROL SYSTEM:")
    print("=========================")
    tv = TV()
    radio = Radio()

    print("\n[Basic Remote with TV]")
    basic_remote = RemoteControl(tv)
    basic_remote.toggle_power()
    basic_remote.volume_up()
    basic_remote.channel_up()

    print("\n[Advanced Remote with TV]")
    advanced_remote = AdvancedRemote(tv)
    advanced_remote.set_channel_direct(99)
    advanced_remote.mute()

    print("\n[Advanced Remote with Radio]")
    radio_remote = AdvancedRemote(radio)
    radio_remote.toggle_power()
    radio_remote.volume_up()
    radio_remote.set_channel_direct(101)

    print("\n\n2. SHAPE RENDERING SYSTEM:")
    print("==========================")
    vector_renderer = VectorRenderer()
    raster_renderer = RasterRenderer()

    print("\n[Vector Rendering]")
    circle1 = Circle(vector_renderer, 5.0)
    circle1.draw()
    circle1.resize(2.0)
    circle1.draw()
    Square(vector_renderer, 10.0).draw()

    print("\n[Raster Rendering]")
    Circle(raster_renderer, 7.0).draw()
    Square(raster_renderer, 15.0).draw()

    print("\n\n3. MESSAGE SENDING SYSTEM:")
    print("==========================")
    email_sender = EmailSender()
    sms_sender = SMSSender()
    push_sender = PushNotificationSender()

    print("\n[Sending different messages via different channels]")
    TextMessage(email_sender, "Hello via Email").send()
    TextMessage(sms_sender, "Hello via SMS").send()
    UrgentMessage(email_sender, "Server is down!").send()
    UrgentMessage(push_sender, "Meeting in 5 minutes!").send()

    print("\n\n=== KEY TAKEAWAYS ===")
    print("1. Bridge SEPARATES abstraction from implementation")
    print("2. Both can vary independently without affecting each other")
    print("3. Uses composition over inheritance")
    print("4. Solves cartesian product problem (N abstractions × M implementations)")
    print("5. Example: Instead of TVRemote, RadioRemote, AdvancedTVRemote, AdvancedRadioRemote")
    print("   We have: Remote + AdvancedRemote × TV + Radio (2 + 2 vs 4 classes)")
    print("6. Client works with abstraction, unaware of implementation details")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())