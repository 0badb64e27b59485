from fastapi import APIRouter, Depends, Path

from rate_directory.models.rates import ConversionOut, RatePair
from rate_directory.services.conversion import convert
from rate_directory.services.currency import valid_pair
from rate_directory.services.directory import RateDirectory

from .rates import get_directory

router = APIRouter(prefix="/api/convertir", tags=["conversion"])


@router.get(
    "/{origin}/{destination}/{amount}",
    response_model=ConversionOut,
    summary="Convert an amount using the direct pair rate",
)
def convert_amount(
    amount: str = Path(..., description="Amount in origin currency, e.g. 100 or 12.5"),
    pair: RatePair = Depends(valid_pair),
    directory: RateDirectory = Depends(get_directory),
):
    outcome = convert(directory, pair.origin, pair.destination, amount)
    return ConversionOut(
        origin=outcome.origin,
        destination=outcome.destination,
        amount=outcome.amount,
        result=outcome.result,
    )
