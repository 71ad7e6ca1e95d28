"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from fabudget.api.routes import users, budget, incomes, expenses, savings

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(budget.router)
api_router.include_router(incomes.router)
api_router.include_router(expenses.router)
api_router.include_router(savings.router)
