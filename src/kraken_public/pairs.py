"""Common pair codes and OHLC interval values."""

XETHXXBT = "XETHXXBT"
XETHZCAD = "XETHZCAD"
XETHZEUR = "XETHZEUR"
XETHZGBP = "XETHZGBP"
XETHZUSD = "XETHZUSD"

XETCXXBT = "XETCXXBT"
XETCZCAD = "XETCZCAD"
XETCZEUR = "XETCZEUR"
XETCZGBP = "XETCZGBP"
XETCZUSD = "XETCZUSD"

XLTCZCAD = "XLTCZCAD"
XLTCZEUR = "XLTCZEUR"
XLTCZUSD = "XLTCZUSD"
XXBTXLTC = "XXBTXLTC"
XXBTZCAD = "XXBTZCAD"
XXBTZEUR = "XXBTZEUR"
XXBTZGBP = "XXBTZGBP"
XXBTZUSD = "XXBTZUSD"

# Candle widths accepted by the OHLC endpoint, in minutes.
OHLC_INTERVALS = (1, 5, 15, 30, 60, 240, 1440, 10080, 21600)
