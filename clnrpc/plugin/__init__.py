"""Building blocks for Core Lightning plugins."""