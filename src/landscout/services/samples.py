from landscout.domain.parcel import Broker, Coordinate, LandType, Parcel, PriceUnit


def sample_parcels() -> list[Parcel]:
    """
    Demo pins shown on first launch (Surat / Vadodara).
    Fresh ids on every call.
    """
    return [
        Parcel(
            title="Surat Ring Road Plot",
            coordinate=Coordinate(latitude=21.2145, longitude=72.8302),
            address="Vesu, Surat",
            land_type=LandType.NA,
            zone="R2",
            price=4500,
            price_unit=PriceUnit.PER_SQUARE_FOOT,
            notes="Upcoming metro corridor, high ROI potential",
            broker=Broker(
                name="Rahul Patel",
                phone="+91-90000-12345",
                whatsapp="+91-90000-12345",
                reliability=4,
                notes="Has direct seller contact",
            ),
            reliability=4,
        ),
        Parcel(
            title="Vadodara Industrial",
            coordinate=Coordinate(latitude=22.3072, longitude=73.1812),
            address="Manjusar GIDC",
            land_type=LandType.INDUSTRIAL,
            zone="I1",
            price=2500,
            price_unit=PriceUnit.PER_SQUARE_YARD,
            notes="Close to highway, logistics park planned",
            broker=Broker(
                name="Sneha Desai",
                phone="+91-95555-45678",
                whatsapp="+91-95555-45678",
                reliability=5,
                notes="Handled similar deals",
            ),
            reliability=5,
        ),
    ]
