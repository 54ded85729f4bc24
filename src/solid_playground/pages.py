"""
Pages: one narrative per principle, each showing the violating version first
and the refactored one second. Output goes to the given text stream.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TextIO

from solid_playground.contexts.accounts import StatementPrinter, build_accounts_module
from solid_playground.contexts.accounts.application import Deposit, GetStatement, OpenAccount, Withdraw
from solid_playground.contexts.accounts.violations import MonolithicBankAccount
from solid_playground.contexts.birds import Bird, Duck, Ostrich, Sparrow, fly_flying_bird, flyers, let_fly
from solid_playground.contexts.birds import violations as naive_birds
from solid_playground.contexts.pricing import DiscountKind, build_pricing_module, default_discounts
from solid_playground.contexts.pricing.application import QuoteDiscount
from solid_playground.contexts.pricing.violations import SwitchDiscountCalculator
from solid_playground.contexts.users import CreateUser, UserService, build_users_module, default_loggers
from solid_playground.contexts.users.violations import HardwiredUserService
from solid_playground.contexts.workers import HumanWorker, RobotWorker, full_day, lunch_break, start_shift
from solid_playground.contexts.workers import violations as naive_workers
from solid_playground.core import Playground, PlaygroundSettings
from solid_playground.errors import LedgerError
from solid_playground.events import EventBusModule
from solid_playground.utils.logger import get_logger

logger = get_logger(__name__)

PageRunner = Callable[[TextIO, PlaygroundSettings], None]


@dataclass(frozen=True)
class Page:
    name: str
    title: str
    run: PageRunner


def _heading(out: TextIO, text: str) -> None:
    print(f"\n== {text} ==", file=out)


def intro(out: TextIO, settings: PlaygroundSettings) -> None:
    print("SOLID design principles:", file=out)
    for page in PAGES.values():
        if page.name != "intro":
            print(f"  {page.name.upper():<4} {page.title}", file=out)


def single_responsibility(out: TextIO, settings: PlaygroundSettings) -> None:
    _heading(out, "Violating SRP")
    account = MonolithicBankAccount("BANK123", settings.opening_balance, stream=out)
    account.deposit(100)
    account.withdraw(500)
    account.withdraw(3000)
    account.print_statement()
    account.notify_user()

    _heading(out, "Adhering to SRP")
    app = (
        Playground(config=settings)
        .register(EventBusModule().in_memory())
        .register(build_accounts_module(out))
    )
    try:
        app.send(OpenAccount("BANK123", settings.opening_balance))
    except LedgerError as exc:
        print(f"OpenAccount refused: {exc}", file=out)
        return
    for command in (Deposit("BANK123", 100), Withdraw("BANK123", 500), Withdraw("BANK123", 3000)):
        verb = type(command).__name__
        try:
            snapshot = app.send(command)
        except LedgerError as exc:
            print(f"{verb} refused: {exc}", file=out)
            continue
        print(f"{verb} {command.amount}. New balance is {snapshot.balance}", file=out)
    app.container.resolve(StatementPrinter).report(app.ask(GetStatement("BANK123")))


def open_closed(out: TextIO, settings: PlaygroundSettings) -> None:
    _heading(out, "Violating OCP")
    naive = SwitchDiscountCalculator()
    for kind in ("seasonal", "loyalty", "none", "student"):
        print(f"{kind:<9} discount on 100: {naive.calculate_discount(kind, 100)}", file=out)

    _heading(out, "Adhering to OCP")
    registry = default_discounts()
    calculator = registry.calculator(DiscountKind.SEASONAL.value, DiscountKind.LOYALTY.value)
    print(f"{calculator!r} on 100: {calculator.calculate_total(100)}", file=out)
    app = Playground(config=settings).register(build_pricing_module(registry))
    total = app.ask(QuoteDiscount(amount=200, discount_keys=("loyalty",)))
    print(f"Quoted loyalty discount on 200: {total}", file=out)


def liskov_substitution(out: TextIO, settings: PlaygroundSettings) -> None:
    _heading(out, "Violating LSP")
    for bird in (naive_birds.Bird(), naive_birds.Duck(), naive_birds.Ostrich()):
        try:
            print(naive_birds.fly_bird(bird), file=out)
        except NotImplementedError as exc:
            logger.info("substitution broke for %s", type(bird).__name__)
            print(f"Runtime failure: {exc}", file=out)

    _heading(out, "Adhering to LSP: class separation")
    for flying_bird in (Duck(), Sparrow()):
        print(fly_flying_bird(flying_bird), file=out)

    _heading(out, "Adhering to LSP: capabilities")
    birds = [Bird(), Duck(), Sparrow(), Ostrich()]
    for bird in birds:
        print(bird.eat(), file=out)
    for flyer in flyers(birds):
        print(let_fly(flyer), file=out)


def interface_segregation(out: TextIO, settings: PlaygroundSettings) -> None:
    _heading(out, "Violating ISP")
    for worker in (naive_workers.HumanWorker(), naive_workers.RobotWorker()):
        print(worker.work(), file=out)
        try:
            print(worker.eat(), file=out)
        except NotImplementedError as exc:
            print(f"Runtime failure: {exc}", file=out)

    _heading(out, "Adhering to ISP")
    human, robot = HumanWorker(), RobotWorker()
    for line in start_shift([human, robot]):
        print(line, file=out)
    for line in lunch_break([human]):
        print(line, file=out)
    for line in full_day([HumanWorker("Ann")]):
        print(line, file=out)


def dependency_inversion(out: TextIO, settings: PlaygroundSettings) -> None:
    _heading(out, "Violating DIP")
    HardwiredUserService(settings.log_file).create_user("Vinay Kumar")
    print(f"(log line written to {settings.log_file})", file=out)

    _heading(out, "Adhering to DIP")
    loggers = default_loggers(settings.log_file, stream=out)
    for key in loggers.keys():
        UserService(loggers.get(key)).create_user(f"Vinay Kumar DIP {key} logger")
    app = Playground(config=settings).register(build_users_module(loggers.get("console")))
    app.send(CreateUser("Created through the playground"))


PAGES: dict[str, Page] = {
    page.name: page
    for page in (
        Page("intro", "What the SOLID principles are", intro),
        Page("srp", "Single Responsibility Principle", single_responsibility),
        Page("ocp", "Open/Closed Principle", open_closed),
        Page("lsp", "Liskov Substitution Principle", liskov_substitution),
        Page("isp", "Interface Segregation Principle", interface_segregation),
        Page("dip", "Dependency Inversion Principle", dependency_inversion),
    )
}


def run_page(name: str, out: TextIO, settings: PlaygroundSettings | None = None) -> None:
    """Run one page by name; KeyError for an unknown name."""
    page = PAGES[name]
    logger.debug("running page %s", name)
    page.run(out, settings or PlaygroundSettings())
