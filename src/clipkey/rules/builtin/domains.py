"""Hostnames that double as credential identifiers (OAuth client IDs, tenants)."""

SECRET_DOMAINS = [
    ".apps.googleusercontent.com",
    ".firebaseapp.com",
    ".amazoncognito.com",
    ".onmicrosoft.com",
    ".azurewebsites.net",
    ".cloudapp.azure.com",
    ".supabase.co",
    ".vercel.app",
    ".netlify.app",
    ".herokuapp.com",
    ".awsapps.com",
    ".okta.com",
    ".auth0.com",
]
