"""ConsultFlow profit and loss reporting core."""
