from structpatterns.facade import (
    BankingFacade,
    ComputerFacade,
    HardDrive,
    HomeTheaterFacade,
    Inventory,
    OnlineShoppingFacade,
    PaymentProcessor,
    SecurityCheck,
    main,
)


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_watch_movie_starts_popcorn_before_dvd(capsys):
    HomeTheaterFacade().watch_movie("Inception")
    lines = _lines(capsys)
    assert lines.index("Popcorn Maker: Turning ON") < lines.index("DVD Player: Turning ON")
    assert "DVD Player: Playing 'Inception'" in lines
    assert lines[-1] == "=== Enjoy your movie! ==="


def test_end_movie_stops_then_ejects(capsys):
    HomeTheaterFacade().end_movie()
    lines = _lines(capsys)
    assert lines.index("DVD Player: Stopping playback") < lines.index(
        "DVD Player: Ejecting disc"
    )
    assert lines[-1] == "=== Movie time is over ==="


def test_hard_drive_returns_boot_data(capsys):
    assert HardDrive().read(0, 1024) == "boot_data"


def test_computer_start_sequence(capsys):
    ComputerFacade().start()
    lines = _lines(capsys)
    assert lines.index("CPU: Freezing...") < lines.index("CPU: Executing...")
    assert "HardDrive: Reading 1024 bytes from sector 0" in lines
    assert lines[-1] == "=== Computer started successfully ==="


def test_inventory_reports_available(capsys):
    assert Inventory().check_availability("Laptop") is True


def test_payment_formats_amount(capsys):
    assert PaymentProcessor().process_payment(999.99) is True
    assert "Payment: Processing payment of $999.99" in _lines(capsys)


def test_place_order_succeeds(capsys):
    shop = OnlineShoppingFacade()
    assert shop.place_order("Laptop", 999.99, "123 Main St", "buyer@example.com") is True
    lines = _lines(capsys)
    assert "Shipping: Shipping Laptop to 123 Main St" in lines
    assert "Notification: Sending confirmation email to buyer@example.com" in lines
    assert lines[-1] == "=== Order completed successfully! ==="


def test_security_check_pin():
    check = SecurityCheck()
    assert check.authenticate("1234") is True
    assert check.authenticate("0000") is False


def test_withdraw_with_valid_pin(capsys):
    assert BankingFacade().withdraw(100.0, "1234") is True
    lines = _lines(capsys)
    assert "Log: Recording - Withdrew $100.000000" in lines
    assert lines[-1] == "=== Withdrawal successful! ==="


def test_withdraw_with_invalid_pin(capsys):
    assert BankingFacade().withdraw(100.0, "9999") is False
    out = capsys.readouterr().out
    assert "Withdrawal failed: Invalid PIN" in out
    assert "Account: Debiting" not in out


def test_main_runs(capsys):
    assert main() == 0
    assert "=== FACADE PATTERN DEMO ===" in capsys.readouterr().out