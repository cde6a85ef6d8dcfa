"""
Finance Overview Business Logic
Fixed vs variable spend against the planned monthly budget
"""
from office_portal.core.normalize import parse_amount

FIXED_EXPENSES = [
    ('rent', '/api/rent', 'amount'),
    ('electric-bills', '/api/electric-bills', 'amount'),
    ('internet-bills', '/api/internet-bills', 'payment'),
    ('sim-bills', '/api/sim-bills', 'payment'),
    ('salaries', '/api/salaries', 'amount'),
]

VARIABLE_EXPENSES = [
    ('travel', '/api/travel', 'advancePay'),
    ('expo-advertisements', '/api/expo-advertisements', 'amount'),
    ('incentives', '/api/incentives/incentive', 'amount'),
    ('commissions', '/api/commissions', 'amount'),
    ('petty-cash', '/api/petty-cash', 'amount'),
]


def format_inr(value):
    """Rupee amount with Indian digit grouping, e.g. 125000 -> '₹1,25,000'"""
    rounded = round(float(value), 2)
    sign = '-' if rounded < 0 else ''
    whole, _, fraction = f'{abs(rounded):.2f}'.partition('.')
    fraction = fraction.rstrip('0')

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ','.join(groups + [tail])

    return f"₹{sign}{whole}{'.' + fraction if fraction else ''}"


def percent_change(current, previous):
    """Signed whole-number percentage change, '+0%' when previous is zero"""
    if previous == 0:
        return '+0%'
    change = (current - previous) / previous * 100
    return f"{'+' if change >= 0 else ''}{change:.0f}%"


def sum_amounts(records, amount_field):
    return sum(parse_amount(r.get(amount_field)) for r in records if isinstance(r, dict))


class FinanceOverviewService:
    """Service for the finance dashboard"""

    def __init__(self, backend, monthly_budget):
        self.backend = backend
        self.monthly_budget = monthly_budget

    def get_overview(self, token):
        """Budget, spend and savings cards; failed endpoints count as empty"""
        groups = FIXED_EXPENSES + VARIABLE_EXPENSES
        lists = self.backend.fetch_many([endpoint for _, endpoint, _ in groups], token=token)

        breakdown = {
            name: sum_amounts(lists.get(endpoint, []), field)
            for name, endpoint, field in groups
        }
        fixed_total = sum(breakdown[name] for name, _, _ in FIXED_EXPENSES)
        variable_total = sum(breakdown[name] for name, _, _ in VARIABLE_EXPENSES)
        savings = self.monthly_budget - (fixed_total + variable_total)

        return {
            'stats': [
                {
                    'name': 'Planned Monthly Budget',
                    'value': format_inr(self.monthly_budget),
                    'change': '+0%',
                },
                {
                    'name': 'Recurring Fixed Expenses',
                    'value': format_inr(fixed_total),
                    'change': percent_change(fixed_total, fixed_total * 0.9),
                },
                {
                    'name': 'Dynamic Operational Costs',
                    'value': format_inr(variable_total),
                    'change': percent_change(variable_total, variable_total * 0.95),
                },
                {
                    'name': 'Net Savings',
                    'value': format_inr(savings),
                    'change': percent_change(savings, savings * 1.1),
                },
            ],
            'totals': {
                'budget': self.monthly_budget,
                'fixed': fixed_total,
                'variable': variable_total,
                'savings': savings,
            },
            'breakdown': breakdown,
        }
