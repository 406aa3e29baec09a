# md5 of "foo@bar.com"
FOO_BAR_HASH = "f3ada405ce890b6f8204094deb12d8a8"

# the example from the gravatar documentation
GRAVATAR_DOCS_EMAIL = "myemailaddress@example.com"
GRAVATAR_DOCS_HASH = "0bc83cb571cd1c50ba6f3e8a78ef1346"
