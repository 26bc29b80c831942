"""
Transaction queue endpoints.

POST /transactions/      → Enqueue a transaction
GET  /transactions/peek  → Look at the next transaction without removing it
POST /transactions/next  → Extract the highest-priority transaction

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Hand the transaction to the scheduler
- Return the response

Every handler is `async def`, so all of them run on the event loop thread
one at a time. The scheduler has no locks and never needs them here.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_scheduler
from api.schemas.transaction import TransactionCreate, TransactionResponse
from scheduler.errors import EmptyQueueError
from scheduler.weighted import WeightedScheduler

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("/", response_model=TransactionResponse, status_code=201)
async def add_transaction(
    txn_in: TransactionCreate,
    scheduler: WeightedScheduler = Depends(get_scheduler),
) -> TransactionResponse:
    """
    Enqueue a transaction.

    If arrival_time is omitted, the transaction "arrives" now and starts
    aging from this moment.
    """
    txn = txn_in.to_transaction(now=scheduler.now())
    scheduler.add(txn)
    return TransactionResponse.from_transaction(txn, scheduler.priority_of(txn))


@router.get("/peek", response_model=TransactionResponse)
async def peek_transaction(
    scheduler: WeightedScheduler = Depends(get_scheduler),
) -> TransactionResponse:
    try:
        txn = scheduler.peek()
    except EmptyQueueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TransactionResponse.from_transaction(txn, scheduler.priority_of(txn))


@router.post("/next", response_model=TransactionResponse)
async def next_transaction(
    scheduler: WeightedScheduler = Depends(get_scheduler),
) -> TransactionResponse:
    """
    Remove and return the highest-priority transaction.

    The reported priority is the score it had at the moment it was chosen.
    """
    try:
        priority = scheduler.priority_of(scheduler.peek())
        txn = scheduler.next()
    except EmptyQueueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TransactionResponse.from_transaction(txn, priority)
