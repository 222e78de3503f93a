"""User-facing texts returned by the portal endpoints."""

HOW_IT_WORKS = [
	"Register as Retailer (₹{retailer}) or Distributor (₹{distributor}).",
	"After registration, recharge wallet first using UPI (required).",
	"Once wallet has enough balance, account becomes active and you can use the portal.",
]

NOT_ACTIVE = "User found but wallet not active. Please recharge first."
WELCOME = "Welcome, {name} ({type})"
RECHARGED = "Wallet recharged successfully."
CREDITED = "Wallet credited."
REMOVED = "Account {uid} removed."
NOTHING_REMOVED = "No account with UID {uid}."
ADMIN_WELCOME = "Logged in as admin."
LOGGED_OUT = "Logged out."
ADMIN_REQUIRED = "Admin login required."
SIMULATION_NOTE = (
	"In this prototype 'I have paid' simulates a successful recharge. "
	"For live payments integrate a gateway."
)


def registration_created(account) -> str:
	return f"New UID created: {account.id}. Proceed to recharge wallet ₹{account.price}."
