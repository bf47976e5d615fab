from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from typing import List, Optional
import logging

from ..exceptions import IdMismatchError, NotFoundError
from ..schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse
from ..services.customer_service import CustomerService, get_customer_service
from ..utils.rate_limiter import limiter, RATE_LIMITS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerResponse], include_in_schema=False)
@router.get("/", response_model=List[CustomerResponse])
def get_all_customers(
    first_name: Optional[str] = Query(None, description="Only customers with this first name"),
    last_name: Optional[str] = Query(None, description="Only customers with this last name"),
    service: CustomerService = Depends(get_customer_service)
):
    """
    All customers ordered by last name, then first name.
    With both filters the two result sets are intersected.
    """
    return service.search(first_name=first_name, last_name=last_name)


@router.get("/email/{email}", response_model=CustomerResponse)
def get_customer_by_email(
    email: str,
    service: CustomerService = Depends(get_customer_service)
):
    customer = service.find_by_email(email)
    if customer is None:
        raise NotFoundError(f"No Customer with the email {email} was found!")
    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    customer = service.find_by_id(customer_id)
    if customer is None:
        raise NotFoundError(f"No Customer with the id {customer_id} was found!")
    logger.info(f"findById {customer_id}: found Customer = {customer!r}")
    return customer


@router.post("", response_model=CustomerResponse, include_in_schema=False, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["create"])
def create_customer(
    request: Request,
    customer_data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service)
):
    # Ids are assigned by the server, any id in the body is dropped
    customer = service.create(customer_data.to_entity())
    logger.info(f"createCustomer completed. Customer = {customer!r}")
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
@limiter.limit(RATE_LIMITS["update"])
def update_customer(
    request: Request,
    customer_id: int,
    customer_data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service)
):
    if customer_data.id is None:
        raise HTTPException(status_code=400, detail="Invalid Customer supplied in request body")

    if customer_data.id != customer_id:
        raise IdMismatchError("The Customer ID in the request body must match that of the Customer being updated")

    if service.find_by_id(customer_id) is None:
        raise NotFoundError(f"No Customer with the id {customer_id} was found!")

    customer = service.update(customer_data.to_entity(id=customer_id))
    logger.info(f"updateCustomer completed. Customer = {customer!r}")
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RATE_LIMITS["delete"])
def delete_customer(
    request: Request,
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    """Deletes the customer together with every booking it owns."""
    customer = service.find_by_id(customer_id)
    if customer is None:
        raise NotFoundError(f"No Customer with the id {customer_id} was found!")

    service.delete(customer)
    logger.info(f"deleteCustomer completed. id = {customer_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
