"""Pull links and images out of a markdown string — zero config, zero deps."""

from numnums import extract_all_images, extract_all_links, extract_image_alt_words

text = "here's ![image](abcd) here's [some anchor](please find me!) some more stuff"

for link in extract_all_links(text).tokens:
    print("link:", link.label, "->", link.url)

for image in extract_all_images(text).tokens:
    print("image:", image.alt, "->", image.url)

url, words = extract_image_alt_words("![I am great.  Thanks!](https://x)")
print("alt words:", words, "url:", url)
