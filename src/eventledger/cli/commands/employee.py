"""Employee management commands."""

import click
from eventledger.cli.error_handling import handle_domain_error, parse_amount_or_exit
from eventledger.domain.employee import EmployeeService
from eventledger.domain.errors import DomainError
from eventledger.utils.amount_parser import format_amount


@click.group()
def employee_group():
    """Manage staff."""
    pass


@employee_group.command("add")
@click.argument("name")
@click.option("--role", required=True, help="Job role (e.g., Driver, Entertainer)")
@click.option("--payment", required=True, help="Base payment per event")
@click.option("--transport-cost", default="0", show_default=True, help="Cost when travelling individually")
@click.option("--phone", help="Phone number")
@click.pass_context
def add_employee(ctx, name, role, payment, transport_cost, phone):
    """Add an employee.

    Examples:
        eventledger employee add "John" --role Driver --payment 150 --transport-cost 30
    """
    service = EmployeeService(ctx.obj["db"])
    base_payment = parse_amount_or_exit(ctx, payment, "payment")
    individual_transport_cost = parse_amount_or_exit(ctx, transport_cost, "transport cost")
    try:
        employee_id = service.create_employee(
            name=name,
            role=role,
            base_payment=base_payment,
            individual_transport_cost=individual_transport_cost,
            phone=phone,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created employee '{name}' (ID: {employee_id})")


@employee_group.command("list")
@click.pass_context
def list_employees(ctx):
    """List employees."""
    employees = EmployeeService(ctx.obj["db"]).list_employees()
    if not employees:
        click.echo("No employees found.")
        return

    click.echo(f"\n{'ID':<6} {'Name':<25} {'Role':<15} {'Payment':>10} {'Transport':>10}")
    click.echo("-" * 70)
    for emp in employees:
        click.echo(
            f"{emp.id:<6} {emp.name[:25]:<25} {emp.role[:15]:<15} "
            f"{format_amount(emp.base_payment):>10} {format_amount(emp.individual_transport_cost):>10}"
        )


@employee_group.command("update")
@click.argument("employee_id", type=int)
@click.option("--name", help="New name")
@click.option("--role", help="New role")
@click.option("--payment", help="New base payment")
@click.option("--transport-cost", help="New individual transport cost")
@click.option("--phone", help="New phone number")
@click.pass_context
def update_employee(ctx, employee_id, name, role, payment, transport_cost, phone):
    """Update an employee.

    Events the employee already works keep the payment they were booked at.
    """
    fields = {
        "name": name,
        "role": role,
        "base_payment": parse_amount_or_exit(ctx, payment, "payment"),
        "individual_transport_cost": parse_amount_or_exit(ctx, transport_cost, "transport cost"),
        "phone": phone,
    }
    fields = {key: value for key, value in fields.items() if value is not None}
    if not fields:
        click.echo("Nothing to update.")
        return
    try:
        EmployeeService(ctx.obj["db"]).update_employee(employee_id, **fields)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated employee {employee_id}")


@employee_group.command("delete")
@click.argument("employee_id", type=int)
@click.pass_context
def delete_employee(ctx, employee_id):
    """Delete (deactivate) an employee."""
    try:
        EmployeeService(ctx.obj["db"]).delete_employee(employee_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted employee {employee_id}")


def register_commands(cli):
    """Register employee commands with main CLI."""
    cli.add_command(employee_group, name="employee")
