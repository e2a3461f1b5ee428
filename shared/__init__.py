"""
VidhiDesk shared configuration, error taxonomy and models.
"""
