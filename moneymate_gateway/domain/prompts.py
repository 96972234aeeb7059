"""Prompt construction for LLM budgeting advice"""

from moneymate_gateway.domain.models import FinancialSnapshot, UserProfile

ADVISOR_SYSTEM_PROMPT = (
    "You are a professional financial advisor providing personalized budget recommendations. "
    "Be specific, practical, and encouraging in your advice."
)


def _money(value) -> str:
    return f"${value:,.2f}"


def build_advice_prompt(profile: UserProfile, snapshot: FinancialSnapshot, transaction_count: int) -> str:
    """
    Render the user message sent to the advisor model.

    Uses the same aggregates as the rule-based recommendations so both advice
    paths describe identical figures.
    """
    goals = ", ".join(profile.financial_goals) if profile.financial_goals else "Not specified"
    marital_status = profile.marital_status.value if profile.marital_status else "Not specified"
    salary = _money(profile.salary) if profile.salary is not None else "Not specified"
    age = profile.age if profile.age is not None else "Not specified"

    if snapshot.expense_breakdown:
        breakdown = "\n".join(
            f"- {category}: {_money(amount)}" for category, amount in snapshot.expense_breakdown.items()
        )
    else:
        breakdown = "- No expenses recorded"

    return f"""As a financial advisor, analyze this user's financial situation and provide personalized budget recommendations:

USER PROFILE:
- Age: {age}
- Annual Salary: {salary}
- Marital Status: {marital_status}
- Financial Goals: {goals}

CURRENT FINANCIAL SUMMARY:
- Total Income (from transactions): {_money(snapshot.total_income)}
- Total Expenses (from transactions): {_money(snapshot.total_expenses)}
- Current Balance: {_money(snapshot.balance)}

EXPENSE BREAKDOWN BY CATEGORY:
{breakdown}

TRANSACTION COUNT: {transaction_count} transactions recorded

Please provide:
1. Analysis of their current spending patterns
2. Specific budget recommendations based on their age, salary, and goals
3. Areas where they can optimize spending
4. Savings strategies appropriate for their situation
5. Emergency fund recommendations
6. Investment suggestions if applicable

Format your response in clear sections with actionable advice. Be specific with dollar amounts and percentages where relevant."""
