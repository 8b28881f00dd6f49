"""Customer commands for the tabledoc CLI."""

import asyncio
import json

from ...core.config import Config
from ...models import Customer
from ...services import ServiceContainer


def add_customer_arguments(parser) -> None:
    """Register the customer subcommands on ``parser``."""
    subparsers = parser.add_subparsers(dest="customer_cmd", required=True)

    list_parser = subparsers.add_parser("list", help="List all customers")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    get_parser = subparsers.add_parser("get", help="Show one customer")
    get_parser.add_argument("id", type=int, help="Customer id")
    get_parser.add_argument("--json", action="store_true", help="Output as JSON")

    add_parser = subparsers.add_parser("add", help="Add a customer")
    add_parser.add_argument("name", help="Customer name")

    update_parser = subparsers.add_parser("update", help="Rename a customer")
    update_parser.add_argument("id", type=int, help="Customer id")
    update_parser.add_argument("name", help="New customer name")

    remove_parser = subparsers.add_parser("remove", help="Remove a customer")
    remove_parser.add_argument("id", type=int, help="Customer id")


def handle_customers(args, config: Config) -> bool:
    """Handle customer subcommands.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Returns:
        True on success, False if the customer was not found or not saved.

    Raises:
        Various tabledoc exceptions.
    """
    return asyncio.run(_run(args, config))


async def _run(args, config: Config) -> bool:
    async with ServiceContainer(config) as services:
        customers = services.customers

        if args.customer_cmd == "list":
            entities = await customers.get_all()
            if args.json:
                print(json.dumps([_to_dict(c) for c in entities], indent=2, ensure_ascii=False))
            elif not entities:
                print("No customers.")
            else:
                for customer in entities:
                    print(f"{customer.id:>6}  {customer.name}")
            return True

        if args.customer_cmd == "get":
            customer = await customers.get_by_id(args.id)
            if customer is None:
                print(f"✗ Customer {args.id} not found")
                return False
            if args.json:
                print(json.dumps(_to_dict(customer), indent=2, ensure_ascii=False))
            else:
                print(f"{customer.id:>6}  {customer.name}")
            return True

        if args.customer_cmd == "add":
            customer = Customer(name=args.name)
            if not await customers.add(customer):
                print(f"✗ Customer {args.name!r} could not be added")
                return False
            print(f"✓ Added customer {customer.id}: {customer.name}")
            return True

        if args.customer_cmd == "update":
            if not await customers.update(Customer(id=args.id, name=args.name)):
                print(f"✗ Customer {args.id} not found or not saved")
                return False
            print(f"✓ Updated customer {args.id}")
            return True

        if args.customer_cmd == "remove":
            if not await customers.remove(args.id):
                print(f"✗ Customer {args.id} not found or not saved")
                return False
            print(f"✓ Removed customer {args.id}")
            return True

    return False


def _to_dict(customer: Customer) -> dict:
    return {"id": customer.id, "name": customer.name}
