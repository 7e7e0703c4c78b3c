"""Narrative generator — plain-English rendering of fare quotes.

Turns a ``TripQuote`` into the text a booking page or chat assistant shows
the rider: route, how the distance was obtained, the offered price and
what the all-inclusive figure adds on top.
"""

from __future__ import annotations

from cabfare.models.results import TripQuote

_SOURCE_NOTES = {
    "fixed": "curated road distance",
    "haversine": "estimated from city coordinates",
    "fallback": "PLACEHOLDER distance, one or both cities are unknown",
}


def _rupees(amount: float) -> str:
    return f"₹{amount:,.0f}"


def generate_quote_narrative(quote: TripQuote) -> str:
    """Multi-line summary of one quote."""
    d = quote.distance
    b = quote.breakdown
    trip_label = "Round trip" if b.trip_type == "roundTrip" else "One way"

    lines: list[str] = [
        f"{trip_label}: {d.from_city.title()} → {d.to_city.title()}",
        f"Distance: {d.distance_km} km ({_SOURCE_NOTES.get(d.source, d.source)}), "
        f"about {b.estimated_time_hours} h on the road",
        f"Cab: {quote.cab_name} ({quote.category})",
    ]

    if b.is_fixed_route:
        lines.append(f"Fixed-route fare: {_rupees(b.all_inclusive_price)} (taxes included)")
        return "\n".join(lines)

    lines += [
        f"Base fare: {_rupees(b.base_price)} at {_rupees(b.per_km_rate)}/km, "
        f"{b.included_km} km included",
        f"Best price ({b.best_discount_pct}% off): {_rupees(b.best_price)}",
        f"  + GST {b.taxes.gst.rate_pct:g}%: {_rupees(b.gst_amount)}",
        f"  + Toll {b.taxes.toll.rate_pct:g}%: {_rupees(b.toll_tax_amount)}",
        f"  + State tax {b.taxes.state.rate_pct:g}%: {_rupees(b.state_tax_amount)}",
        f"All-inclusive: {_rupees(b.all_inclusive_price)}",
    ]
    if d.source == "fallback":
        lines.append("Note: confirm the route before booking; this price uses a placeholder distance.")
    return "\n".join(lines)


def generate_comparison_narrative(quotes: list[TripQuote]) -> str:
    """One line per cab, in the order given, plus the cheapest option."""
    if not quotes:
        return "No cabs to compare."

    first = quotes[0].distance
    lines = [f"{first.from_city.title()} → {first.to_city.title()}, {first.distance_km} km:"]
    for q in quotes:
        lines.append(
            f"  {q.cab_name:<12} best {_rupees(q.breakdown.best_price):>9}   "
            f"all-inclusive {_rupees(q.breakdown.all_inclusive_price):>9}"
        )
    cheapest = min(quotes, key=lambda q: q.breakdown.all_inclusive_price)
    lines.append(f"Cheapest: {cheapest.cab_name} at {_rupees(cheapest.breakdown.all_inclusive_price)}")
    return "\n".join(lines)
