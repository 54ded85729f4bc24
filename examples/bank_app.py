"""
App composition — the ledger, its notifications and the discount registry
registered as modules on one playground.
"""
from solid_playground import Playground, PlaygroundSettings
from solid_playground.contexts.accounts import StatementPrinter, build_accounts_module
from solid_playground.contexts.accounts.application import Deposit, GetStatement, OpenAccount, Withdraw
from solid_playground.contexts.pricing import build_pricing_module
from solid_playground.contexts.pricing.application import QuoteDiscount
from solid_playground.errors import LedgerError
from solid_playground.events import EventBusModule
from solid_playground.utils import setup_logger

settings = PlaygroundSettings.from_env()
setup_logger(level=settings.log_level)

app = Playground(config=settings)

# Event bus first, so the contexts subscribe to it
app.register(EventBusModule().in_memory())

# Bounded contexts
app.register(build_accounts_module())
app.register(build_pricing_module())

if __name__ == "__main__":
    app.send(OpenAccount("BANK123", settings.opening_balance))
    app.send(Deposit("BANK123", 100))
    app.send(Withdraw("BANK123", 500))
    try:
        app.send(Withdraw("BANK123", 3000))
    except LedgerError as exc:
        print(f"Refused: {exc}")
    app.container.resolve(StatementPrinter).report(app.ask(GetStatement("BANK123")))
    print(f"Discount on 100: {app.ask(QuoteDiscount(amount=100))}")
