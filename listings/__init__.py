"""
Property Listing Service.
Property listings with an approval workflow and filtered, paginated browsing.
"""
